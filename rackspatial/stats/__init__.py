# -*- coding: utf-8 -*-
"""Summary statistics that can be attached to entity and resequence layers."""
