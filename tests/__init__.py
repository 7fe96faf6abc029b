# Tests for the ADBC Snowflake driver loader
