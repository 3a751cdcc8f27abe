# -*- coding: utf-8 -*-
"""The utils package holds helpers for sample layouts and summaries."""
