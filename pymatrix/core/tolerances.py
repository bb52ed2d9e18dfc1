"""
Tolerance tiers for numerical comparison.

Results of the cofactor algorithms are exact for small integer matrices
and accumulate rounding error otherwise. These tiers fix what "equal
within floating-point tolerance" means for Matrix.allclose() and the
test suite:
- CPU FP64: well-conditioned input
- CPU FP64 ill-conditioned: relaxed for cond > 1e4
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='Double precision, well-conditioned input',
)

CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='Double precision, ill-conditioned (cond > 1e4)',
)
