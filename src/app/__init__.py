"""App — coração do sistema: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (inicialização, wiring)
- use_cases/: casos de uso (cache -> fetch -> parse -> normalização)
- services/: regras de normalização de eventos
- infra/: implementações concretas de IO (fetcher, parser, cache)
- protocols/: contratos/interfaces
- domain/: modelos de evento e entrada de cache
- observability/: correlation_id e métricas em log

Padrão: app executa; api adapta; config configura; utils apoia.
"""
