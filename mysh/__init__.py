"""mysh - a minimal interactive shell"""

__version__ = "0.1.0"

from .config import Config
from .shell import Shell
from .status import CommandResult, Status

__all__ = ["Config", "Shell", "CommandResult", "Status", "__version__"]
