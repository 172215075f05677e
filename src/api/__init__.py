"""API: adaptadores para FastAPI/Starlette.

Responsabilidades:
- Converter o request HTTP em Query
- Expor as regras de validação da query como dependency do FastAPI

Subpastas:
- dependencies/: dependencies injetáveis em rotas

NÃO PODE conter: regras JSON:API nem execução de validadores (motor externo).
"""
