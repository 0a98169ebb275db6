#!/usr/bin/env python3
"""
Default configuration values for recut
"""

DEFAULT_CONFIG = {
    'logging': {
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    },
    'display': {
        'vertical_cut_symbol': '|',
        'horizontal_cut_symbol': '-',
    },
    'cuts': {
        'validate_horizontal': True,
    },
    'sequence': {
        'circular': False,
    },
    'output': {
        'format': 'text',
    },
}
