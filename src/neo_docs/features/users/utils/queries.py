"""User directory SQL query constants."""

USER_GET_BY_ID = """
    SELECT id, role
    FROM {schema}.{table}
    WHERE id = $1
"""
