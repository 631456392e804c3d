# Core type aliases for minischeme's data model.
# Every parsed value is a member of the closed family in minischeme.types
# (Pair, Number, Boolean, String, Symbol, Variable, Procedure, Builtin,
# SpecialForm, Application, Undefined). The same objects serve as code and data.
#
# Naming guidance:
# - Value:       Use anywhere a runtime or parsed value is passed around.
# - EvaluatorFn: The evaluate(value, env) callable handed to special forms.

from typing import Any, Callable

__version__ = "0.3.0"

# Runtime value alias
Value = Any

# Evaluator function type: evaluate(value, env) -> Value
EvaluatorFn = Callable[..., Value]
