import sys

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import Style

styles = Style.from_dict(
    {
        "success": "#00C000",
        "info": "",
    }
)


def success(text: str):
    print_formatted_text(
        FormattedText([("class:success", f"{text}")]), style=styles, file=sys.stdout
    )


def info(text: str):
    print_formatted_text(
        FormattedText([("class:info", f"{text}")]), style=styles, file=sys.stdout
    )
