from pgcompose import sql


def main() -> None:
    # Syntax-only example: compose a query and print the compiled text and values.
    columns = sql.join([sql.ident("id"), sql.ident("email")], ", ")
    query = sql.compose([
        "SELECT ", columns,
        " FROM ", sql.ident("public", "users"),
        " WHERE active = ", True,
        " AND created_at > ", "2024-01-01",
    ])

    print("PostgreSQL SQL:", query.text)
    print("PostgreSQL values:", query.values)


if __name__ == "__main__":
    main()
