"""Flattening of nested JSON records into delimited rows.

Submodules:
  reader    -- JSON / JSON Lines parsing that keeps numbers as their source text
  flatten   -- tree-to-rows flattening (cross product for objects, union for arrays)
  schema    -- deterministic column schema unioned across all rows
  pipeline  -- UnnestOptions and the main run() entry point
  cli       -- the ``unnest`` command
"""
