"""
Infrastructure layer for SQL Facade.

- schema: column and table descriptors, table-name resolution
- sql: pure SQL text generation and placeholder handling
- database: statement handles, parameter binding and the session facade
"""
