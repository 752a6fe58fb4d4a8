"""
Configuração centralizada de logging para a aplicação
Configura o logger AWS Lambda Powertools (JSON estruturado em stdout)
"""
from aws_lambda_powertools import Logger

from shared.config.settings import SERVICE_NAME, LOG_LEVEL


def get_logger(service_name: str = None, child: bool = False) -> Logger:
    """
    Retorna uma instância configurada do Logger

    Args:
        service_name: Nome do serviço (se None, usa SERVICE_NAME das settings)
        child: Se True, cria um child logger

    Returns:
        Logger configurado
    """
    if service_name is None:
        service_name = SERVICE_NAME

    if child:
        return Logger(service=service_name, child=True)

    return Logger(service=service_name, level=LOG_LEVEL)


# Logger principal da aplicação
logger = get_logger()
