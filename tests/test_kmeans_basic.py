import numpy as np
import pytest
import torch

from greedykmeans import KMeans, seed, InvalidK, DimensionMismatch

from data_gen import make_blobs
from utils import labels_equal_up_to_perm, sorted_rows


def test_kmeans_fits_simple_blobs():
    rng = np.random.default_rng(0)
    X1 = rng.normal(loc=0.0, scale=0.3, size=(100, 2))
    X2 = rng.normal(loc=3.0, scale=0.3, size=(100, 2))
    X = np.vstack([X1, X2])

    km = KMeans(n_clusters=2, random_state=0, device="cpu")
    km.fit(X)

    assert km.labels_ is not None
    assert len(km.labels_) == X.shape[0]
    assert km.cluster_centers_.shape == (2, 2)
    assert km.converged_
    assert labels_equal_up_to_perm(km.labels_, np.repeat([0, 1], 100), K=2)


def test_recovers_blob_centers():
    X, y, C = make_blobs(n_per=60, spread=0.2, seed=1)
    km = KMeans(n_clusters=3, random_state=2, device="cpu").fit(X)

    np.testing.assert_allclose(sorted_rows(km.cluster_centers_), sorted_rows(C), atol=0.1)
    assert labels_equal_up_to_perm(km.labels_, y, K=3)


def test_predict_and_score():
    X, _, _ = make_blobs(n_per=30, seed=3)
    km = KMeans(n_clusters=3, random_state=0, device="cpu").fit(X)

    assert torch.equal(km.predict(X), km.labels_)
    assert km.score(X) == pytest.approx(-km.inertia_)
    assert km.score(X) <= 0.0


def test_predict_before_fit():
    with pytest.raises(RuntimeError):
        KMeans(n_clusters=2).predict([[0.0, 0.0]])


def test_fit_predict_returns_labels():
    X, _, _ = make_blobs(n_per=20, seed=4)
    km = KMeans(n_clusters=3, random_state=0, device="cpu")
    labels = km.fit_predict(X)
    assert labels is km.labels_


def test_random_init():
    X, y, _ = make_blobs(n_per=40, spread=0.2, seed=5)
    km = KMeans(n_clusters=3, init="random", random_state=1, device="cpu").fit(X)
    assert km.cluster_centers_.shape == (3, 2)
    assert int(torch.bincount(km.labels_, minlength=3).sum()) == X.shape[0]


def test_explicit_initial_centers():
    X = [[0.0, 0.0], [0.0, 1.0], [10.0, 0.0], [10.0, 1.0]]
    km = KMeans(n_clusters=2, init=[[1.0, 0.0], [9.0, 0.0]], device="cpu").fit(X)

    assert km.cluster_centers_.tolist() == [[0.0, 0.5], [10.0, 0.5]]
    assert km.labels_.tolist() == [0, 0, 1, 1]
    assert km.n_iter_ == 1
    assert km.inertia_ == pytest.approx(1.0)


def test_zero_iterations_returns_seeds():
    X, _, _ = make_blobs(n_per=25, seed=6)
    km = KMeans(n_clusters=3, max_iter=0, random_state=9, device="cpu").fit(X)

    assert torch.equal(km.cluster_centers_, seed(X, 3, random_state=9, device="cpu"))
    assert km.n_iter_ == 0
    assert not km.converged_
    assert km.history_ == []
    assert len(km.labels_) == X.shape[0]
    assert np.isfinite(km.inertia_)


def test_unknown_init_rejected():
    with pytest.raises(ValueError, match="Unknown init"):
        KMeans(n_clusters=2, init="furthest-first")


def test_constructor_validation():
    with pytest.raises(InvalidK):
        KMeans(n_clusters=0)
    with pytest.raises(TypeError):
        KMeans(n_clusters=2, max_iter=2.5)


def test_negative_budget_behaves_like_zero():
    X, _, _ = make_blobs(n_per=20, seed=8)
    km = KMeans(n_clusters=3, max_iter=-5, random_state=4, device="cpu").fit(X)

    assert km.max_iter == 0
    assert km.n_iter_ == 0
    assert km.history_ == []
    assert torch.equal(km.cluster_centers_, seed(X, 3, random_state=4, device="cpu"))


def test_ragged_input_rejected():
    with pytest.raises(DimensionMismatch):
        KMeans(n_clusters=1, device="cpu").fit([[1.0, 2.0], [3.0]])


def test_verbose_reports_non_convergence(capsys):
    X, _, _ = make_blobs(n_per=20, seed=7)
    km = KMeans(n_clusters=3, max_iter=1, verbose=1, random_state=0, device="cpu")
    with pytest.warns(UserWarning, match="Failed to converge"):
        km.fit(X)

    out = capsys.readouterr().out
    assert "Initializing 3 clusters" in out
    assert "Iteration   0" in out


def test_verbose_warns_about_empty_cluster():
    X = [[0.0], [1.0], [2.0]]
    km = KMeans(n_clusters=2, init=[[1.0], [100.0]], max_iter=3, verbose=2, device="cpu")
    with pytest.warns(UserWarning, match="Cluster 1 has no points"):
        km.fit(X)
    assert km.cluster_centers_[1].item() == 100.0


def test_get_and_set_params():
    km = KMeans(n_clusters=4, max_iter=7, device="cpu")
    params = km.get_params()
    assert params["n_clusters"] == 4
    assert params["max_iter"] == 7

    km.set_params(max_iter=3)
    assert km.max_iter == 3
