"""
Exemplo: Tratamento de erros.

Este exemplo mostra as exceções que o sheetclient levanta e como
tratá-las. Não há retry interno: cada falha chega ao chamador, que
decide se tenta novamente.
"""

import os
import time

from dotenv import load_dotenv

from sheetclient import (
    AuthError,
    Config,
    ConfigError,
    DeleteRowsOptions,
    ReadDataOptions,
    SheetApiError,
    SheetClient,
    SheetNotFoundError,
)

# Carrega variáveis de ambiente do .env
load_dotenv()


def read_with_retry(client: SheetClient, options: ReadDataOptions, tries: int = 3):
    """
    Lê dados tentando novamente apenas em erros transitórios (429 e 5xx).

    Args:
        client: Cliente configurado
        options: Opções de leitura
        tries: Número máximo de tentativas

    Raises:
        SheetApiError: Se todas as tentativas falharem ou o erro não for transitório
    """
    wait = 1.0
    for attempt in range(1, tries + 1):
        try:
            return client.read_data(options)
        except SheetApiError as e:
            if attempt == tries or not (e.status == 429 or e.status >= 500):
                raise
            print(f"Tentativa {attempt} falhou ({e.status}), aguardando {wait:.1f}s...")
            time.sleep(wait)
            wait *= 2


def main():
    spreadsheet_id = os.environ["SPREADSHEET_ID"]

    print("=" * 70)
    print("Exemplo: Tratamento de erros")
    print("=" * 70)

    # Provider desconhecido → ConfigError, antes de qualquer chamada de rede
    try:
        SheetClient(Config(provider="excel", credentials={"access_token": "x"}))
    except ConfigError as e:
        print(f"ConfigError: {e}")

    # Sem credenciais → AuthError na construção
    try:
        SheetClient(Config(provider="google", credentials={}, service_account_file=""))
    except AuthError as e:
        print(f"AuthError: {e}")

    client = SheetClient()

    # Intervalo inválido → SheetApiError com status e corpo da resposta
    try:
        read_with_retry(client, ReadDataOptions(spreadsheet_id, "Aba Inexistente"))
    except SheetApiError as e:
        print(f"SheetApiError {e.status}: {e.body}")

    # Aba desconhecida na remoção de linhas → SheetNotFoundError
    try:
        client.delete_rows(DeleteRowsOptions(spreadsheet_id, "Aba Inexistente", [2]))
    except SheetNotFoundError as e:
        print(f"SheetNotFoundError: {e}")


if __name__ == "__main__":
    main()
