from dyescript.validation.validator import VariableNameValidator

__all__ = ["VariableNameValidator"]
