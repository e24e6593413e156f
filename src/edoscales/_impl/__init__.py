from .config import *  # noqa: F401, F403
from .names import *  # noqa: F401, F403
from .pattern import *  # noqa: F401, F403
from .enumerator import *  # noqa: F401, F403
from .paging import *  # noqa: F401, F403
