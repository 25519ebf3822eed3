from chess_adjudication.cli.app import app

if __name__ == "__main__":
    app()
