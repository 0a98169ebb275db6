#!/usr/bin/env python3
"""
Configuration schema definition for validation
"""
from typing import Dict, Any, List

class ConfigSchema:
    """Configuration schema for validation"""

    OUTPUT_FORMATS = ('text', 'json', 'tsv')

    SCHEMA = {
        'logging': {
            'level': {'type': str, 'required': False},
            'format': {'type': str, 'required': False},
            'log_dir': {'type': str, 'required': False},
        },
        'display': {
            'vertical_cut_symbol': {'type': str, 'required': True},
            'horizontal_cut_symbol': {'type': str, 'required': True},
        },
        'cuts': {
            'validate_horizontal': {'type': bool, 'required': False},
        },
        'sequence': {
            'circular': {'type': bool, 'required': False},
        },
        'output': {
            'format': {'type': str, 'required': False},
        },
    }

    @classmethod
    def validate(cls, config: Dict[str, Any]) -> List[str]:
        """Validate configuration against schema

        Args:
            config: Configuration to validate

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        for section, fields in cls.SCHEMA.items():
            if any(props.get('required', False) for props in fields.values()):
                if section not in config:
                    errors.append(f"Missing required configuration section: {section}")
                    continue

            if section not in config:
                continue

            section_config = config[section]
            if not isinstance(section_config, dict):
                errors.append(f"Configuration section {section} must be a mapping")
                continue

            for field, props in fields.items():
                if props.get('required', False) and field not in section_config:
                    errors.append(f"Missing required configuration field: {section}.{field}")
                    continue

                if field in section_config and 'type' in props:
                    expected_type = props['type']
                    if not isinstance(section_config[field], expected_type):
                        errors.append(
                            f"Invalid type for {section}.{field}: expected {expected_type.__name__}, "
                            f"got {type(section_config[field]).__name__}"
                        )

        # Display symbols must occupy exactly one text column
        for field in ('vertical_cut_symbol', 'horizontal_cut_symbol'):
            symbol = config.get('display', {}).get(field)
            if isinstance(symbol, str) and len(symbol) != 1:
                errors.append(f"display.{field} must be a single character, got {symbol!r}")

        output_format = config.get('output', {}).get('format')
        if isinstance(output_format, str) and output_format not in cls.OUTPUT_FORMATS:
            errors.append(f"Invalid output.format: {output_format}. Must be one of {list(cls.OUTPUT_FORMATS)}")

        return errors
