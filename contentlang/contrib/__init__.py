# -*- coding: utf-8 -*-
"""
contrib

Optional integrations with third-party backends.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""


# The End
