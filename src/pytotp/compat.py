import os
from random import SystemRandom

# Use secure random number generation
random = SystemRandom()


class SystemRandomReader(object):
    """
    Random source backed by the operating system CSPRNG.

    Any object with a ``read(n) -> bytes`` method can stand in for this one.
    """

    def read(self, n: int) -> bytes:
        return os.urandom(n)
