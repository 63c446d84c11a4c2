"""Application of primitive procedures.

Arguments arrive already evaluated; the primitive table is fixed, so application
is a lookup followed by a call.
"""

from __future__ import annotations

import logging
from typing import Sequence

from schemelet import LispValue
from schemelet.builtin import PRIMITIVES
from schemelet.errors import UnknownProcedureError

logger = logging.getLogger(__name__)


def apply(name: str, args: Sequence[LispValue]) -> LispValue:
    """Apply the primitive bound to `name` to `args`.

    Raises UnknownProcedureError when no primitive has that name; any error the
    primitive raises propagates unchanged.
    """
    fn = PRIMITIVES.get(name)
    if fn is None:
        raise UnknownProcedureError("Unrecognized primitive function args", name)
    logger.debug("Applying %s to (%s)", name, " ".join(str(a) for a in args))
    return fn(args)
