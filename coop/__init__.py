from .generator import Generator as Generator
from .generator import Iterator as Iterator
from .generator import generator as generator
from .handle import InvalidOperation as InvalidOperation
from .handle import InvalidState as InvalidState
from .resumable import Resumable as Resumable
from .suspend import suspend as suspend
from .task import StartPolicy as StartPolicy
from .task import Task as Task
from .task import lazy_task as lazy_task
from .task import task as task
from .wait import wait_all as wait_all
from .wait import wait_any as wait_any
