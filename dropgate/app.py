import os
from typing import Any, Dict

from dropgate.web import webapp

if __name__ == '__main__':
    APP_CONFIG: Dict[str, Any] = {
        'host': '0.0.0.0',  # NOQA
        'port': 8080,
        'threaded': True,
    }

    is_prod = os.getenv('env', '').lower() == 'production'
    APP_CONFIG['debug'] = not is_prod
    webapp.run(**APP_CONFIG)
