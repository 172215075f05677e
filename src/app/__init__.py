"""App: composition root do adaptador de validação.

Subpastas:
- bootstrap/: inicialização (settings e logging)

Padrão: app inicializa; api adapta; validation compõe; config e utils apoiam.
"""
