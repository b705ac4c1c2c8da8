r"""
Utilities (:mod:`netmsa.utils`)
===============================

This module provide various utility functions.

.. currentmodule:: netmsa.utils
"""
import inspect
from datetime import datetime
from functools import wraps
from multiprocessing import Pool


def now():
    return datetime.now()


def log_metadata(key: str = None, class_attribute: str = "_method_trace"):
    """wrapper for recording method run times and arguments on an
    instance."""

    def wrapped(f):
        @wraps(f)
        def _wrapped(self, *args, **kwargs):
            trace = getattr(self, class_attribute, None)
            if not isinstance(trace, dict):
                raise ValueError(
                    "Instance {} must have a dict attribute '{}'".format(
                        self, class_attribute
                    )
                )
            t1 = now()
            result = f(self, *args, **kwargs)
            t2 = now()

            argspec = inspect.getfullargspec(f)
            argdict = dict(zip(argspec.args[1:], args))
            argdict.update(kwargs)
            trace[key or f.__name__] = {
                "__name__": f.__name__,
                "start": str(t1),
                "end": str(t2),
                "args": argdict,
            }
            return result

        return _wrapped

    return wrapped


class FakePool:
    """Stand-in for :class:`multiprocessing.Pool` that maps in process."""

    def __init__(self, *args, **kwargs):
        pass

    def __enter__(self):
        return self

    def __exit__(self, a, b, c):
        pass

    @staticmethod
    def map(func, args):
        return [func(arg) for arg in args]


def make_pool(n_jobs: int):
    """Return a process pool for `n_jobs` > 1, else a :class:`FakePool`."""
    if n_jobs is not None and n_jobs > 1:
        return Pool(processes=n_jobs)
    return FakePool()
