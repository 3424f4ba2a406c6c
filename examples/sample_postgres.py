from dotenv import load_dotenv
import os
import psycopg
from pgcompose import sql

def main():
    # Load environment variables from .env file
    load_dotenv()

    # Build connection string from environment variables
    db_host = os.getenv('DB_HOST')
    db_port = os.getenv('DB_PORT')
    db_name = os.getenv('DB_NAME')
    db_user = os.getenv('DB_USER')
    db_password = os.getenv('DB_PASSWORD')

    connection_string = f"postgresql://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"

    # RawCursor sends $n placeholders to the server untouched
    with psycopg.connect(connection_string, cursor_factory=psycopg.RawCursor) as conn:
        users = sql.ident("sample_users")

        print("Creating table 'sample_users'...")
        conn.execute(sql(["CREATE TABLE IF NOT EXISTS ", " (id SERIAL PRIMARY KEY, name TEXT NOT NULL, age INTEGER)"], users).text)

        print("Inserting data...")
        rows = sql.join([sql(["(", ", ", ")"], name, age) for name, age in [("Alice", 30), ("Bob", 25)]], ", ")
        insert = sql(["INSERT INTO ", " (name, age) VALUES ", ""], users, rows)
        conn.execute(insert.text, insert.values)

        print("Selecting data...")
        select = sql(["SELECT name, age FROM ", " WHERE age >= ", " ORDER BY age"], users, 18)
        for row in conn.execute(select.text, select.values).fetchall():
            print(row)

        print("Dropping table...")
        conn.execute(sql(["DROP TABLE ", ""], users).text)

if __name__ == "__main__":
    main()
