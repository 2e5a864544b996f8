# -*- coding: utf-8 -*-
"""Test-suite package for content language settings."""
