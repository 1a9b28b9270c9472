"""
Exemplo básico de uso do sheetclient.

Este script demonstra como criar uma aba, adicionar registros com
mapeamento de cabeçalho, ler os dados e atualizar um intervalo.

Variáveis de ambiente esperadas (ou arquivo .env):
    SPREADSHEET_ID, e GOOGLE_ACCESS_TOKEN ou GOOGLE_SERVICE_ACCOUNT_FILE
    (ou GOOGLE_PRIVATE_KEY + GOOGLE_CLIENT_EMAIL).
"""

import logging
import os

from dotenv import load_dotenv

from sheetclient import (
    AddRowsOptions,
    Config,
    CreateSheetOptions,
    ReadDataOptions,
    SheetClient,
    SheetExistsError,
    UpdateCellsOptions,
)

# Carrega variáveis de ambiente do arquivo .env
load_dotenv()

SHEET_NAME = "Contatos"


def main():
    """Função principal."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    spreadsheet_id = os.environ["SPREADSHEET_ID"]
    config = Config()
    client = SheetClient(config)

    print("=" * 60)
    print(f"📊 Planilha: {spreadsheet_id}")
    print(f"🔌 Provider: {config.provider}")
    print("=" * 60)

    try:
        client.create_sheet(CreateSheetOptions(spreadsheet_id, SHEET_NAME))
        print(f"🆕 Aba '{SHEET_NAME}' criada")
    except SheetExistsError:
        print(f"📄 Aba '{SHEET_NAME}' já existe")

    # O cabeçalho só é escrito se a aba estiver vazia
    client.add_rows(
        AddRowsOptions(spreadsheet_id, SHEET_NAME, header_map={"name": "Nome", "email": "Email"}),
        [
            {"name": "Alice", "email": "alice@example.com"},
            {"name": "Bob", "email": "bob@example.com"},
        ],
    )

    client.update_cells(UpdateCellsOptions(
        spreadsheet_id,
        SHEET_NAME,
        values=[["Alice Souza", "alice@example.com"]],
        range=f"{SHEET_NAME}!A2:B2",
    ))

    for row in client.read_data(ReadDataOptions(spreadsheet_id, SHEET_NAME)):
        print(f"✅ {row}")


if __name__ == "__main__":
    main()
