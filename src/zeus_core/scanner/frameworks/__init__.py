"""Framework matcher registry."""

from __future__ import annotations

from zeus_core.scanner.frameworks.base import Matcher
from zeus_core.scanner.frameworks.express import ExpressMatcher
from zeus_core.scanner.frameworks.fastify import FastifyMatcher
from zeus_core.scanner.frameworks.nestjs import NestMatcher

__all__ = ["ExpressMatcher", "FastifyMatcher", "Matcher", "NestMatcher", "default_matchers"]


def default_matchers() -> list[Matcher]:
    """Built-in matchers in the order they run against each file."""
    return [ExpressMatcher(), FastifyMatcher(), NestMatcher()]
