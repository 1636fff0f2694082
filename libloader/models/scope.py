from enum import Enum


class DependencyScope(str, Enum):
    COMPILE = "compile"
    PROVIDED = "provided" # on the runtime path, never bundled
    RUNTIME = "runtime"
    TEST = "test"
    SYSTEM = "system"
