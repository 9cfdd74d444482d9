import pytest

from poisson_disk.core.config import SamplerConfig
from poisson_disk.core.constants import DEFAULT_REJECTION_LIMIT
from poisson_disk.core.geometry import Domain
from poisson_disk.core.sampler import PoissonSampler


def test_defaults_are_valid():
    cfg = SamplerConfig()
    assert cfg.validate() is cfg
    assert cfg.rejection_limit == DEFAULT_REJECTION_LIMIT
    assert cfg.domain == Domain(0.0, 0.0, 1.0, 1.0)


@pytest.mark.parametrize('overrides', [
    dict(xmax=0.0),
    dict(ymin=2.0),
    dict(xmin=float('-inf')),
    dict(min_dist=0.0),
    dict(min_dist=-0.5),
    dict(min_dist=float('nan')),
    dict(min_dist=1e-60),
    dict(xmax=1e39),
    dict(ymin=float('nan')),
    dict(rejection_limit=0),
    dict(rejection_limit=2.5),
])
def test_validate_rejects_bad_preconditions(overrides):
    with pytest.raises(ValueError):
        SamplerConfig(**overrides).validate()


def test_negative_seed_is_valid():
    cfg = SamplerConfig(0, 0, 10, 10, 1.0, 30, seed=-4).validate()
    assert PoissonSampler.from_config(cfg).generate_config(cfg) == \
        PoissonSampler(seed=-4).generate(0, 0, 10, 10, 1.0, 30)


def test_from_dict_filters_unknown_keys_and_unwraps():
    cfg = SamplerConfig.from_dict({'type': 'poisson', 'config': {
        'xmin': -1, 'ymin': -2, 'xmax': 3, 'ymax': 4, 'min_dist': 0.5, 'seed': 9, 'colour': 'red'}})
    assert cfg.domain == Domain(-1.0, -2.0, 3.0, 4.0)
    assert cfg.min_dist == 0.5 and cfg.seed == 9
    assert cfg.rejection_limit == DEFAULT_REJECTION_LIMIT


def test_to_dict_round_trip():
    cfg = SamplerConfig(0, 0, 10, 5, 0.75, 8, 3)
    assert SamplerConfig.from_dict(cfg.to_dict()) == cfg


def test_sampler_from_config_matches_direct_call():
    cfg = SamplerConfig(0, 0, 30, 20, 1.5, 12, seed=77)
    via_cfg = PoissonSampler.from_config(cfg).generate_config(cfg)
    direct = PoissonSampler(seed=77).generate(0, 0, 30, 20, 1.5, 12)
    assert via_cfg == direct
