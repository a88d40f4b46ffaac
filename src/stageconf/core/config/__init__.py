# src/stageconf/core/config/__init__.py

"""
Camada de configuração do stageconf.

Responsabilidades do pacote:
    - Descoberta dos arquivos `{root}/{stage}/*.yaml`
    - Validação da chave raiz de cada arquivo contra o seu estágio
    - Resolução da configuração final via merge distinto
    - Leitura somente leitura por caminho pontuado

Invariantes:
    - `defaults` é sempre a camada base
    - Nenhuma árvore parcial é produzida em caso de erro
    - A árvore carregada não é alterável pela interface pública
"""
