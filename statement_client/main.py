from statement_client.cli.app import app


def main() -> None:
    """Entry point: run the statement client CLI."""
    app()


if __name__ == "__main__":
    main()
