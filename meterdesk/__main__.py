# -*- coding: utf-8 -*-
import sys

from .main_window import main

sys.exit(main())
