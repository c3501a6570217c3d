# -----------------------------
# Transactions Repository
# -----------------------------

def insert_transaction(conn, date, description, amount, type, category=None):
    """
    Inserts a transaction and returns its id.
    - conn: DuckDB connection (from get_db() or passed in)
    - amount: non-negative; ``type`` ('income' or 'expense') carries the sign
    """
    try:
        row = conn.execute(
            """
            INSERT INTO transactions (date, description, amount, type, category)
            VALUES (?, ?, ?, ?, ?)
            RETURNING id
            """,
            (date, description, amount, type, category)
        ).fetchone()
    except Exception as e:
        # Check if exception is a unique constraint violation (duplicate)
        msg = str(e).lower()
        if "unique" in msg or "duplicate" in msg:
            raise ValueError("Duplicate transaction (unique constraint)")
        else:
            raise
    return row[0]

def get_all_transactions(conn, limit=None):
    """
    Returns all transactions, newest first.
    - conn: DuckDB connection
    - limit: optional, max number of rows
    """
    query = """
    SELECT id, date, description, amount, type, category
    FROM transactions
    ORDER BY date DESC, id DESC
    """
    params = []

    if limit:
        query += " LIMIT ?"
        params.append(limit)

    return conn.execute(query, params).fetchall()

def get_transaction_by_id(conn, transaction_id):
    return conn.execute(
        """
        SELECT id, date, description, amount, type, category
        FROM transactions
        WHERE id = ?
        """,
        (transaction_id,)
    ).fetchone()

def delete_transaction(conn, transaction_id):
    """
    Deletes a transaction. Returns True if a row was removed.
    """
    if get_transaction_by_id(conn, transaction_id) is None:
        return False
    conn.execute("DELETE FROM transactions WHERE id = ?", (transaction_id,))
    return True
