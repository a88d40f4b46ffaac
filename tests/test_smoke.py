# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do stageconf.

Garantem apenas que o pacote importa e expõe sua API pública.
"""


def test_smoke():
    import stageconf

    assert stageconf.Configuration is not None
    assert "distinct_merge" in stageconf.__all__
