#!/usr/bin/env python3
"""
Script per elaborare un file CSV di metodi di iscrizione da riga di comando.

Esempio:
    python scripts/upload_enrolment_methods.py enrolments.csv
    python scripts/upload_enrolment_methods.py 5f3a... --user 12 --validate-only
"""

import argparse
import logging
import os
import sys

# Aggiungi il path del progetto
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.database import SessionLocal, init_db
from src.core.settings import get_upload_settings
from src.services.enrolment_methods.enrolment_methods_handler import EnrolmentMethodsHandler


def upload_enrolment_methods(file_id: str, id_user: int = None, validate_only: bool = False) -> int:
    """Valida ed elabora il file; restituisce l'exit code"""
    db = SessionLocal()

    try:
        handler = EnrolmentMethodsHandler(db, file_id, id_user, allow_paths=True)
        result = handler.run(validate_only=validate_only)

        if not result.success:
            print(f"[ERROR] {result.error['message']} (status {result.error['status_code']})")
            return 1

        if validate_only:
            print(f"[SUCCESS] {file_id}: tutte le righe hanno 5 colonne")
        else:
            print(result.report)
            print(f"[SUCCESS] {result.lines} righe elaborate")
        return 0
    finally:
        db.close()


def main():
    """Funzione principale"""
    parser = argparse.ArgumentParser(description="Upload metodi di iscrizione (collegamenti meta) da CSV")
    parser.add_argument("file_id", help="Percorso del file CSV o draft_item_id di un file caricato")
    parser.add_argument("--user", type=int, dest="id_user", help="ID utente proprietario del file caricato")
    parser.add_argument("--validate-only", action="store_true", help="Controlla solo il numero di colonne")
    parser.add_argument("--create-schema", action="store_true", help="Crea le tabelle mancanti prima di elaborare")

    args = parser.parse_args()

    logging.basicConfig(
        level=get_upload_settings().log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.create_schema:
        init_db()

    sys.exit(upload_enrolment_methods(args.file_id, args.id_user, args.validate_only))


if __name__ == "__main__":
    main()
