"""Protocol definitions for cpx adapters.

Protocols use ``typing.Protocol`` with ``@runtime_checkable`` so they work
both for static type checking and ``isinstance()`` checks.
"""

from .file_adapter_protocol import FileAdapterProtocol


__all__ = ["FileAdapterProtocol"]
