from .bounds import RadiiBounds, compute_bounds, residual_norm
from .certify import RadiiPolynomial, ProofResult, certify
from .proof import RadiiProof, prove
from .sweep import prove_many

__all__ = [
    "RadiiBounds",
    "compute_bounds",
    "residual_norm",
    "RadiiPolynomial",
    "ProofResult",
    "certify",
    "RadiiProof",
    "prove",
    "prove_many",
]
