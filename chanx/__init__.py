from .errors import TransportError, TransportClosed, TransportCancelled
from .transport import Transport
from .stage import Stage
from .operators import *

__version__ = "0.1.0"
