from sqlalchemy import JSON, String
from sqlalchemy.dialects.postgresql import ARRAY, JSONB

# Postgres gets native array/jsonb columns; other engines (sqlite in tests) store JSON.
StringList = ARRAY(String).with_variant(JSON(), "sqlite")
JsonDocument = JSONB().with_variant(JSON(), "sqlite")
