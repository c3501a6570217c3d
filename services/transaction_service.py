import logging

from db import get_db
from models.transaction import Transaction
from repositories.transactions_repository import (
    get_all_transactions as repo_get_all_transactions,
    insert_transaction as repo_insert_transaction,
    delete_transaction as repo_delete_transaction,
)


def get_all_transactions(limit=None):
    """Return stored transactions as ``Transaction`` objects, newest first.

    Opens and closes a database connection on the caller’s behalf.
    """
    conn = get_db()
    try:
        rows = repo_get_all_transactions(conn, limit=limit)
    finally:
        conn.close()
    return [Transaction.from_row(row) for row in rows]


def add_transaction(*, date, description, amount, type, category=None):
    """Service wrapper around repository insert. Returns the new id."""
    conn = get_db()
    try:
        transaction_id = repo_insert_transaction(
            conn,
            date=date,
            description=description.strip(),
            amount=amount,
            type=type,
            category=category.strip() if category else None,
        )
    finally:
        conn.close()

    logging.info(f"Transaction {transaction_id} inserted ({type} {amount} on {date})")
    return transaction_id


def remove_transaction(transaction_id):
    conn = get_db()
    try:
        return repo_delete_transaction(conn, transaction_id)
    finally:
        conn.close()
