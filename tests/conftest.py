"""Pytest configuration for localechain test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Shared fixtures build the Zoo bundle family used across the suite:

    Zoo        name, greeting, open, close, animal
    Zoo_en     name, greeting, open, animal, favorite
    Zoo_en_US  name, greeting
    Zoo_fr     name, greeting, open
    Zoo_fr_FR  greeting
"""

import os

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

from localechain import BundleResolver, DictBundleStore

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# ZOO BUNDLE FAMILY
# =============================================================================

ZOO_BUNDLES: dict[str, dict[str, str]] = {
    "": {
        "name": "Default Zoo",
        "greeting": "Welcome",
        "open": "The zoo is open",
        "close": "The zoo is closed",
        "animal": "animal",
    },
    "en": {
        "name": "English Zoo",
        "greeting": "Hello",
        "open": "We are open",
        "animal": "animal",
        "favorite": "Our favorite animal is the lion",
    },
    "en_US": {
        "name": "American Zoo",
        "greeting": "Hey there",
    },
    "fr": {
        "name": "Zoo Francais",
        "greeting": "Bonjour",
        "open": "Nous sommes ouverts",
    },
    "fr_FR": {
        "greeting": "Salut",
    },
}


@pytest.fixture
def zoo_store() -> DictBundleStore:
    """In-memory store holding the full Zoo family."""
    return DictBundleStore({"Zoo": ZOO_BUNDLES})


@pytest.fixture
def zoo_resolver(zoo_store: DictBundleStore) -> BundleResolver:
    """Resolver over the Zoo family with en_US as default locale."""
    return BundleResolver(zoo_store, default_locale="en_US")
