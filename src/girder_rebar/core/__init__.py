# Core calculation engine
from .cost import CostBreakdown, CostEstimator
from .flexure import FlexuralLayout, FlexuralLayoutPlanner, Rejected
from .loads import DesignForces, LoadAnalyzer
from .optimizer import DesignOptimizer, RebarDesignEngine, SearchState, design_girder
from .sizing import suggest_section
from .shear import ShearDesigner, ShearPlan
