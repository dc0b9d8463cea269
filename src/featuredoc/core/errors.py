#!/usr/bin/env python3
"""
FEATUREDOC ERRORS
-----------------
Every failure raised by FeatureDoc derives from FeatureDocError so the CLI
can surface the message verbatim and abort the documentation build.

Author: FeatureDoc Team
Date: 2026-10-18
"""


class FeatureDocError(Exception):
    """Base class. str(error) is the message shown to the manifest author."""


class StructuralError(FeatureDocError):
    """A table header or a 'default' list could not be parsed."""


class AssociationError(FeatureDocError):
    """A doc comment cannot be tied to a feature or optional dependency."""


class UnbalancedValueError(FeatureDocError):
    """A value opened brackets that were never closed."""


class EmptyResultError(FeatureDocError):
    """The manifest contains no documented entries."""


class ManifestNotFoundError(FeatureDocError):
    """The manifest file could not be read."""


class ConfigError(FeatureDocError):
    """The configuration file or a CLI override is invalid."""


class InjectionError(FeatureDocError):
    """The target document has no usable marker pair."""
