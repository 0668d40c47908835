# painel_estoque/infra/logger.py
"""
Sistema de logging para as operações do painel de estoque.

Este módulo configura e fornece loggers para registrar as operações
relevantes do sistema: análises, atualizações de nível mínimo,
importações de planilhas e operações no banco de dados.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Any, Optional


# Flag global para habilitar/desabilitar logging
ENABLE_LOGGING = os.environ.get("PAINEL_ESTOQUE_LOG", "").strip().lower() in {"1", "true", "sim"}
# Flag global para habilitar/desabilitar prints/output
ENABLE_OUTPUT = False

def print_system(*args, **kwargs):
    """Print controlado pelo ENABLE_OUTPUT."""
    if ENABLE_OUTPUT:
        print(*args, **kwargs)

# Configuração base dos loggers
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

def setup_logger(name: str, log_file: str, level: int = logging.INFO) -> logging.Logger:
    """
    Configura um logger específico com arquivo de saída.

    O arquivo só é aberto na primeira mensagem emitida.

    Args:
        name: Nome do logger
        log_file: Caminho do arquivo de log
        level: Nível de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Logger configurado
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    # Remove todos os handlers existentes
    while logger.handlers:
        antigo = logger.handlers[0]
        logger.removeHandler(antigo)
        antigo.close()

    file_handler = logging.FileHandler(log_file, encoding='utf-8', delay=True)
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(file_handler)

    return logger

# Diretório base para logs (na pasta do pacote, ou via variável de ambiente)
BASE_DIR = Path(__file__).parent.parent
LOGS_DIR = Path(os.environ.get("PAINEL_ESTOQUE_LOGS_DIR") or (BASE_DIR / "logs"))

LOG_FILES = {
    "transactions": LOGS_DIR / "transactions.log",
    "database": LOGS_DIR / "database.log",
    "system": LOGS_DIR / "system.log",
}

transaction_logger = setup_logger('painel_estoque.transactions', str(LOG_FILES["transactions"]))
database_logger = setup_logger('painel_estoque.database', str(LOG_FILES["database"]))
system_logger = setup_logger('painel_estoque.system', str(LOG_FILES["system"]))


def _ativo() -> bool:
    if not (ENABLE_LOGGING or ENABLE_OUTPUT):
        return False
    LOGS_DIR.mkdir(parents=True, exist_ok=True)
    return True

def log_transaction(operation: str, data: Dict[str, Any], result: Optional[Any] = None, error: Optional[str] = None) -> None:
    """
    Registra uma transação completa no log.

    Args:
        operation: Tipo de operação (analise, nivel_minimo, importar)
        data: Dados da transação
        result: Resultado da operação (opcional)
        error: Mensagem de erro (opcional)
    """
    if not _ativo():
        return
    if error:
        transaction_logger.error(f"TRANSACTION_FAILED: {operation} - {error} - Data: {data}")
    else:
        transaction_logger.info(f"TRANSACTION_SUCCESS: {operation} - Result: {result} - Data: {data}")

def log_database_operation(table: str, operation: str, affected_rows: int = 0, **kwargs) -> None:
    """Log específico para operações no banco de dados."""
    if not _ativo():
        return
    log_data = {
        "table": table,
        "operation": operation,
        "affected_rows": affected_rows,
        **kwargs
    }
    database_logger.info(f"DB_{operation}: {log_data}")

def log_system_event(event: str, details: Dict[str, Any] = None, level: str = "info") -> None:
    """
    Log para eventos do sistema.

    Args:
        event: Descrição do evento
        details: Detalhes adicionais (opcional)
        level: Nível do log (info, warning, error)
    """
    if not _ativo():
        return
    log_data = {
        "event": event,
        "details": details or {}
    }
    log_method = getattr(system_logger, level.lower(), system_logger.info)
    log_method(f"SYSTEM_EVENT: {event} - {log_data}")

def log_file_operation(operation: str, file_path: str, rows_processed: int = 0, **kwargs) -> None:
    """Log para operações de arquivo (importação)."""
    if not _ativo():
        return
    log_data = {
        "operation": operation,
        "file_path": file_path,
        "rows_processed": rows_processed,
        **kwargs
    }
    system_logger.info(f"FILE_{operation.upper()}: {log_data}")

def get_log_summary(log_type: str = "transactions", lines: int = 100) -> Optional[str]:
    """
    Obtém um resumo dos logs recentes.

    Args:
        log_type: Tipo de log (transactions, database, system)
        lines: Número de linhas a retornar

    Returns:
        Conteúdo do log como string, ou None com o logging desligado
    """
    if not (ENABLE_LOGGING or ENABLE_OUTPUT):
        return None

    log_file = LOG_FILES.get(log_type)
    if not log_file or not log_file.exists():
        return f"Log {log_type} não encontrado."

    try:
        with open(log_file, 'r', encoding='utf-8') as f:
            all_lines = f.readlines()
            return ''.join(all_lines[-lines:])
    except OSError as e:
        return f"Erro ao ler log {log_type}: {str(e)}"
