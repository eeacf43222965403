# -*- coding: utf-8 -*-
"""
Tests package for the form builder.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

# The End
