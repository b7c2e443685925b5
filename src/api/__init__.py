"""API — camada de borda HTTP.

Responsabilidades:
- Resolver parâmetros de query (year, force, start/end)
- Delegar para os use cases de app/
- Traduzir erros em respostas HTTP (500 JSON, 404 texto)
- Aplicar CORS e correlation_id

Subpastas:
- middleware/: CORS e propagação de correlation_id
- routes/: endpoints HTTP (health, school-events)

NÃO PODE conter: parse de HTML, regras de normalização, IO com upstream.
"""
