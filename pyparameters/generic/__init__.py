"""
Parameter extraction for multi-component models.

Covers models that report coefficients split by component
(conditional, zero-inflated, dispersion, ...) and/or by response level
(multinomial and ordinal models).

Public API:
    model_parameters_generic(model)  - merged parameter table
    get_parameters(model)            - point estimates
    standard_error(model)            - standard errors
    ci(model)                        - Wald confidence intervals
    p_value(model)                   - p-values
    p_adjust(p, method)              - multiple-comparison correction
    ComponentFit                     - container for models without adapter
    register_adapter(adapter)        - add support for another model family
"""

from pyparameters.generic.solvers import (
    model_parameters_generic,
    get_parameters,
    standard_error,
    ci,
    p_value,
)
from pyparameters.generic._common import ComponentFit, COMPONENTS, VALID_COMPONENTS
from pyparameters.generic._p_adjust import p_adjust
from pyparameters.generic._merge import merge_key
from pyparameters.generic.adapters import (
    ComponentFitAdapter,
    StatsmodelsAdapter,
    register_adapter,
    unregister_adapter,
    find_adapter,
    get_adapter,
)

__all__ = [
    "model_parameters_generic",
    "get_parameters",
    "standard_error",
    "ci",
    "p_value",
    "p_adjust",
    "merge_key",
    "ComponentFit",
    "COMPONENTS",
    "VALID_COMPONENTS",
    "ComponentFitAdapter",
    "StatsmodelsAdapter",
    "register_adapter",
    "unregister_adapter",
    "find_adapter",
    "get_adapter",
]
