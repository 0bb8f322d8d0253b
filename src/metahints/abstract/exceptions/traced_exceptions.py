"""
MIT License

Copyright (c) 2025 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2025-07-11
Updated: 2026-10-18
Description: Traceable base exception and the root error of the hints library.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import traceback
from typing import Any


def format_exception(e: BaseException) -> str:
    """Render an exception as printed by the interpreter: its traceback, its notes and the
    exceptions it was raised from.

    Args:
        e (BaseException): The exception to render.

    Returns:
        str: The rendered exception.
    """
    return "".join(traceback.format_exception(type(e), e, e.__traceback__))


class TracedException(Exception):
    """Exception able to render itself with its traceback."""

    def traceback_format(self) -> str:
        return format_exception(self)


class MetaHintsError(TracedException):
    """Root of every error raised by metahints.

    Args:
        *args (Any): the usual exception arguments, the message first.
        element (Any): the program element being processed when the error was raised, if any.
            It is added to the notes of the exception.
    """

    def __init__(self, *args: Any, element: Any = None) -> None:
        super().__init__(*args)
        self.element = element
        if element is not None:
            self.add_note(f"while processing {element}")
