# run.py
from pathlib import Path

from dotenv import load_dotenv

# Load .env for local dev; hosted environments inject their own variables
load_dotenv(dotenv_path=Path(__file__).with_name(".env"), override=True)

from ohs import create_app  # noqa: E402

app = create_app()

if __name__ == "__main__":
    # no reloader to avoid double imports
    app.run(debug=True, use_reloader=False)
