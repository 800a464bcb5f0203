"""Convert human-oriented text into machine-friendly delimited tables.

Subpackages:
  justified  -- recover columns from whitespace-aligned or border-drawn text tables
  nested     -- flatten nested JSON records into rows over a unioned column schema

Shared modules:
  config     -- project root, .env loading, logging setup
  errors     -- error hierarchy surfaced to the command-line layer
  emit       -- delimited line rendering shared by both converters
"""
