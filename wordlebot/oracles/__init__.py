from .programmatic import ProgrammaticOracle, compare
from .interactive import InteractiveOracle

__all__ = ["ProgrammaticOracle", "compare", "InteractiveOracle"]
