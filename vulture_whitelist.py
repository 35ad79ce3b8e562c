"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic) that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validators - used by framework via @field_validator decorator
_.normalize_words_url  # noqa: F821  # unused method (wotd/core/config.py:45)
_.expand_config_home  # noqa: F821  # unused method (wotd/core/config.py:53)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_cross_fields  # noqa: F821  # unused method (wotd/core/config.py:60)

# Pydantic model_config class variable - read by framework at class definition time
# Enables camelCase aliases and ignores extra keys in API payloads
model_config  # noqa: F821  # unused variable (wotd/core/models.py:11)

# Payload fields kept for completeness of the API model
audio  # unused variable (wotd/core/models.py:18)
antonyms  # unused variable (wotd/core/models.py:27)
