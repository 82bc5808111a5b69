# koala_lightgbm/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided input (column names, config, etc).
    """


class FeatureIncompatibilityError(UserInputError):
    """
    Table / matrix does not carry the features a fitted scheme expects.
    Not recoverable locally: refit, or supply a compatible table.
    """


class CategoricalFeatureResolutionError(UserInputError):
    """
    A categorical feature name could not be resolved to a column index.
    """


class NotFittedError(RuntimeError):
    """
    Machine used for prediction before fit.
    """
