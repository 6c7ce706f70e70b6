from twinstyle.diagnostics.suggestions import (
    log_no_class,
    soft_match_configs,
    suggest_class_names,
)

__all__ = ["log_no_class", "soft_match_configs", "suggest_class_names"]
