from __future__ import annotations

from aoc2022 import errors, inputs, registry, runner, stream_utils, utils
from aoc2022.days import build_registry
from aoc2022.errors import *
from aoc2022.inputs import *
from aoc2022.registry import *
from aoc2022.runner import *
from aoc2022.sources import from_text, non_empty_lines
from aoc2022.stream import FnTransformer, Stream, Transformer, transformer
from aoc2022.stream_utils import *
from aoc2022.utils import *

# Not the `stream` decorator, which shares its name with the module
__all__ = (
    *errors.__all__,
    *inputs.__all__,
    *registry.__all__,
    *runner.__all__,
    *stream_utils.__all__,
    *utils.__all__,
    "FnTransformer",
    "Stream",
    "Transformer",
    "build_registry",
    "from_text",
    "non_empty_lines",
    "transformer",
)
