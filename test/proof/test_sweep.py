from fractions import Fraction

import numpy as np
import pandas as pd

from radiipoly.model import Lorenz, LorenzParameters
from radiipoly.model.example_models import lorenz_equilibria
from radiipoly.proof import prove_many
from radiipoly.proof.sweep import RESULT_COLUMNS


def near_c_plus(params):
    return lorenz_equilibria(params)[-1] + 0.1


def test_prove_many_over_rho():
    model = Lorenz()
    params_list = [LorenzParameters(sigma=10, rho=rho, beta=Fraction(8, 3)) for rho in [5, 15, 28, 99.96]]

    df = prove_many(model, params_list, near_c_plus, max_workers=2)

    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ["sigma", "rho", "beta"] + RESULT_COLUMNS
    assert len(df) == 4
    assert df["rho"].tolist() == [5, 15, 28, 99.96]
    assert df["success"].all()
    assert (df["r0"] > 0).all()


def test_prove_many_with_tuples_and_fixed_guess():
    model = Lorenz()
    df = prove_many(model, [(10, 28, 8 / 3), (10, 28.5, 8 / 3)], np.array([8.0, 8.0, 26.0]), rigorous=False)
    assert df["success"].all()
    assert df["sigma"].tolist() == [10, 10]


def test_prove_many_reports_failures_as_rows():
    model = Lorenz()
    # a witness radius beyond r2 is a failed proof, not an error
    df = prove_many(model, [(10, 28, 8 / 3)], np.array([8.0, 8.0, 26.0]), r0=10.0)
    assert not df["success"].any()
    assert "outside" in df["reason"].iloc[0]
