"""Shared fixtures for uri-host tests."""

import pytest

from uri_host.config import reset_config
from uri_host.suffix import PublicSuffixRules

SAMPLE_PSL = """\
// This Source Code Form is subject to the terms of the Mozilla Public
// License, v. 2.0.

// VERSION: 2024-01-01_00-00-00_UTC

// ===BEGIN ICANN DOMAINS===

// com
com

// au
au
com.au
net.au

// uk
uk
co.uk

// be
be
ac.be

// fr
fr

// ru and its IDN
ru
рф

// ck
ck
*.ck
!www.ck

// jp
jp
kawasaki.jp
*.kawasaki.jp
!city.kawasaki.jp

// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===

// Google
blogspot.com

// ===END PRIVATE DOMAINS===
"""


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop any cached configuration between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_psl_text():
    """Text of a small Public Suffix List."""
    return SAMPLE_PSL


@pytest.fixture
def rules(sample_psl_text):
    """Rules from the sample list, ICANN section only."""
    return PublicSuffixRules.from_string(sample_psl_text)


@pytest.fixture
def all_rules(sample_psl_text):
    """Rules from the sample list, including private domains."""
    return PublicSuffixRules.from_string(sample_psl_text, only_icann=False)
