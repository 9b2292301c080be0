""":mod:`mixtrans.exceptions` provides exception classes for mixtrans.

.. autoclass:: MixtransException
.. autoclass:: TransportModelError
.. autoclass:: UnsupportedDiffusionBasisError
"""

__copyright__ = """
Copyright (C) 2024 University of Illinois Board of Trustees
"""

__license__ = """
Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
"""


class MixtransException(Exception):
    """Exception base class for mixtrans exceptions.

    .. attribute:: model

        A :class:`str` with the label of the transport model that raised the
        exception, or *None* if not tied to a model.

    .. attribute:: message

        A :class:`str` describing the message for the exception.
    """

    def __init__(self, message, model=None):
        """Record the offending model on creation."""
        self.model = model
        self.message = message
        super().__init__(self.message)


class TransportModelError(MixtransException):
    """Indicate that a transport model cannot provide a requested quantity."""

    pass


class UnsupportedDiffusionBasisError(TransportModelError, NotImplementedError):
    """Indicate that a transport closure does not define a diffusion basis.

    Raised synchronously whenever a caller asks a closure for diffusion
    coefficients in a basis it cannot supply. Callers that need the basis
    must select a different transport model or flux formulation.

    .. attribute:: basis

        The :class:`~mixtrans.transport.DiffusionBasis` that was requested.
    """

    def __init__(self, model, basis):
        self.basis = basis
        super().__init__(
            f"{model} transport does not provide diffusion coefficients "
            f"in the '{basis.value}' basis",
            model=model)
