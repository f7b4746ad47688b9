from .either import Either as Either
from .either import Left as Left
from .either import Right as Right
from .either import left as left
from .either import right as right
from .result import FATAL_EXCEPTIONS as FATAL_EXCEPTIONS
from .result import Failure as Failure
from .result import FailureError as FailureError
from .result import Success as Success
from .result import Try as Try
from .result import failure as failure
from .result import success as success
