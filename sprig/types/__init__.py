from sprig.types.symbol import Symbol
from sprig.types.nil import Nil, NilType
from sprig.types.environment import Environment
from sprig.types.procedure import Builtin, Closure
from sprig.types.printer import display

__all__ = ["Symbol", "Nil", "NilType", "Environment", "Builtin", "Closure", "display"]
