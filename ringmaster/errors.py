"""Exceptions raised while classifying or transforming expressions."""

from __future__ import annotations


class ExpressionError(Exception):
    """Base class for expression classification and transform failures."""


class DomainError(ExpressionError, ValueError):
    """An operation was asked of an expression in the wrong domain."""


class MixedDomainError(DomainError):
    """Time- and frequency-domain terms were combined under one node."""


class UnknownTransformError(ExpressionError):
    """
    No closed-form Laplace rule matches the node shape.

    Attributes:
        node: The sub-expression that could not be rewritten
        kind: Class name of that sub-expression
        target: Domain the rewrite was heading for
    """

    def __init__(self, node, target, reason: str = ""):
        self.node = node
        self.kind = type(node).__name__
        self.target = target
        message = f"no {target.value}-domain transform for {self.kind} {node}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
