from .container_defs import *
from .schema_defs import *
from .linked_list import *
