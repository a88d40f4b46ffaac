# src/stageconf/core/__init__.py
"""
Core do stageconf.

Reúne o merge distinto, o carregamento por estágio, o acesso por
notação de ponto e os diagnósticos estruturados.

Limites explícitos:
    - Não depende da CLI
    - Não lê variáveis de ambiente fora de `config.discovery`
"""
