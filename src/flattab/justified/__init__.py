"""Column inference for justified plain-text tables.

Submodules:
  patterns   -- border glyphs, control separators and whitespace regexes
  policy     -- DelimiterPolicy and TableOptions pydantic models
  spans      -- ColumnSpan and whole-input column-span inference
  tokenizer  -- per-line field extraction and rule-line filtering
  selection  -- header naming and requested-column resolution
  pipeline   -- main run() entry point
  cli        -- the ``unjustify`` command
"""
