"""
Configurações centralizadas da aplicação
"""
import os

# Nome do serviço nos logs estruturados
SERVICE_NAME = os.environ.get(
    'POWERTOOLS_SERVICE_NAME',
    os.environ.get('DD_SERVICE', 'weather-search')
)

# Nível de log
LOG_LEVEL = os.environ.get('LOG_LEVEL', os.environ.get('POWERTOOLS_LOG_LEVEL', 'INFO'))
