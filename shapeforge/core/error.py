# ShapeForge - A Vector Shape Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

from typing import NoReturn, Optional

# error types
RANGECHECK = 0
LIMITCHECK = 1
NOCURRENTPOINT = 2
INVALIDRESTORE = 3
INVALIDMATRIX = 4

error_names = {
    RANGECHECK: "rangecheck",
    LIMITCHECK: "limitcheck",
    NOCURRENTPOINT: "nocurrentpoint",
    INVALIDRESTORE: "invalidrestore",
    INVALIDMATRIX: "invalidmatrix",
}

# errors that can only be raised by a backend surface
BACKEND_ERRORS = frozenset({LIMITCHECK, NOCURRENTPOINT, INVALIDRESTORE, INVALIDMATRIX})


class ShapeforgeError(Exception):
    """Base class for every error raised by ShapeForge itself."""

    def __init__(self, error_code: int, func_name: str, detail: Optional[str] = None) -> None:
        self.error_code = error_code
        self.error_name = error_names.get(error_code, f"error#{error_code}")
        self.func_name = func_name
        self.detail = detail
        message = f"/{self.error_name} in --{func_name}--"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class PreconditionViolated(ShapeforgeError):
    """The caller's inputs leave the algorithm with no sensible behavior."""


class BackendError(ShapeforgeError):
    """The backend surface could not carry out a drawing call."""


def e(error_code: int, func_name: str, detail: Optional[str] = None) -> NoReturn:
    # private helpers report under the public operator name
    func_name = func_name.lstrip("_")

    if error_code in BACKEND_ERRORS:
        raise BackendError(error_code, func_name, detail)
    raise PreconditionViolated(error_code, func_name, detail)
