"""Type aliases shared across dbinterface for the shapes of parameters and cache keys."""
from collections.abc import Hashable, Mapping, Sequence
from typing import Any


type PositionalParams = Sequence[Any]
"""Ordered parameter values bound to positional placeholders."""

type NamedParams = Mapping[str, Any]
"""Parameter values bound to named placeholders."""

type Params = PositionalParams | NamedParams
"""A single row of parameters for one execution."""

type ColumnParams = Sequence[Sequence[Any]] | Mapping[str, Sequence[Any]]
"""Column oriented batch parameters, each slot holds one value per batch row."""

type CacheKey = Hashable
"""Caller chosen identifier for a cached prepared statement."""
