from .sources import *
from .funcs import *
from .aggregates import *
