import pytest

from atomqed.constants import ALPHA
from atomqed.errors import CacheNotInitializedError, QedModelError
from atomqed.settings import (
    HydrogenicReference,
    HydrogenicReferenceCache,
    QedContext,
    QedModel,
    QedSettings,
)
from atomqed.subshell import KappaClass


@pytest.mark.quick
def test_default_settings():
    s = QedSettings()
    assert s.model is QedModel.PETERSBURG
    assert s.alpha == ALPHA
    assert s.quadrature_order == 7
    assert not (s.terms.wichmann_kroll or s.terms.electric_form_factor or s.terms.magnetic_form_factor)


@pytest.mark.quick
def test_model_parse():
    assert QedModel.parse("Sydney") is QedModel.SYDNEY
    assert QedModel.parse(" petersburg ") is QedModel.PETERSBURG
    assert QedModel.parse(QedModel.SYDNEY) is QedModel.SYDNEY
    with pytest.raises(QedModelError):
        QedModel.parse("Bethe")


@pytest.mark.quick
def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("ATOMQED_QED_MODEL", "sydney")
    monkeypatch.setenv("ATOMQED_ALPHA", "0.0073")
    s = QedSettings.from_env()
    assert s.model is QedModel.SYDNEY
    assert s.alpha == 0.0073
    assert QedSettings.from_env(model=QedModel.PETERSBURG).model is QedModel.PETERSBURG


@pytest.mark.quick
def test_settings_from_env_defaults(monkeypatch):
    monkeypatch.delenv("ATOMQED_QED_MODEL", raising=False)
    monkeypatch.delenv("ATOMQED_ALPHA", raising=False)
    assert QedSettings.from_env() == QedSettings()


@pytest.mark.quick
def test_reference_cache_lookup_and_clear():
    cache = HydrogenicReferenceCache(maxsize=3)
    ref = HydrogenicReference(26.0, (1.0, 2.0, 3.0, 4.0, 5.0))
    cache.store(ref)
    assert 26 in cache
    assert cache.get(26.0) is ref
    assert ref[KappaClass.D3_2] == 4.0
    with pytest.raises(CacheNotInitializedError):
        cache.get(27.0)
    cache.clear()
    assert len(cache) == 0


@pytest.mark.quick
def test_reference_cache_lru_eviction():
    cache = HydrogenicReferenceCache(maxsize=2)
    for Z in (10.0, 20.0):
        cache.store(HydrogenicReference(Z, (1.0,) * 5))
    cache.get(10.0)
    cache.store(HydrogenicReference(30.0, (1.0,) * 5))
    assert 10.0 in cache and 30.0 in cache and 20.0 not in cache
    with pytest.raises(ValueError):
        HydrogenicReferenceCache(maxsize=0)


@pytest.mark.quick
def test_context_owns_cache_sized_from_settings():
    ctx = QedContext(QedSettings(cache_size=3))
    assert ctx.cache.maxsize == 3
    assert QedContext().cache is not QedContext().cache
