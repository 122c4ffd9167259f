# scripts/resolve_assets.py
#
#   python scripts/resolve_assets.py --root /var/www --rules assets.json \
#       app-js=https://site/app.js?foo=bar theme-css=/static/theme.css
import sys

from asset_buster.cli import main


if __name__ == "__main__":
    sys.exit(main())
