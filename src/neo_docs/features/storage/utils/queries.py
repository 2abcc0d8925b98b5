"""Record store SQL query constants.

Each collection lives in its own table holding the record payload as
jsonb. Queries are parameterized by schema and table name.
"""

RECORD_COLUMNS = "id, data, created_at, updated_at"

# Schema management
RECORD_TABLE_CREATE = """
    CREATE TABLE IF NOT EXISTS {schema}.{table} (
        id UUID PRIMARY KEY,
        data JSONB NOT NULL DEFAULT '{{}}'::jsonb,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )
"""

RECORD_DATA_INDEX_CREATE = """
    CREATE INDEX IF NOT EXISTS {table}_data_gin_idx
    ON {schema}.{table} USING GIN (data)
"""

RECORD_CREATED_AT_INDEX_CREATE = """
    CREATE INDEX IF NOT EXISTS {table}_created_at_idx
    ON {schema}.{table} (created_at DESC)
"""

RECORD_UNIQUE_INDEX_CREATE = """
    CREATE UNIQUE INDEX IF NOT EXISTS {table}_{field}_uniq
    ON {schema}.{table} ((data->>'{field}'))
"""

RECORD_FIELD_INDEX_CREATE = """
    CREATE INDEX IF NOT EXISTS {index_name}
    ON {schema}.{table} ({columns})
"""

# CRUD
RECORD_INSERT = """
    INSERT INTO {schema}.{table} (id, data, created_at, updated_at)
    VALUES ($1, $2::jsonb, $3, $4)
    RETURNING """ + RECORD_COLUMNS

RECORD_GET_BY_ID = """
    SELECT """ + RECORD_COLUMNS + """
    FROM {schema}.{table}
    WHERE id = $1
"""

RECORD_UPDATE = """
    UPDATE {schema}.{table} SET
        data = data || $2::jsonb,
        updated_at = $3
    WHERE id = $1
    RETURNING """ + RECORD_COLUMNS

RECORD_DELETE = """
    DELETE FROM {schema}.{table}
    WHERE id = $1
    RETURNING id
"""

# Listing; {where}, {order} and {page} are built by the store
RECORD_LIST = """
    SELECT """ + RECORD_COLUMNS + """
    FROM {schema}.{table}
    {where}
    {order}
    {page}
"""

RECORD_COUNT = """
    SELECT COUNT(*) FROM {schema}.{table}
    {where}
"""
