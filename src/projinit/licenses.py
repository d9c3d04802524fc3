"""License selection and ``LICENSE`` file contents."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from .config import LicenseChoice
from .prompts import Prompter
from .template import TemplateRenderer

__all__ = ["LICENSE_MENU", "LICENSE_TEMPLATES", "render_license", "select_license"]


LOGGER = logging.getLogger(__name__)

LICENSE_MENU = (
    (LicenseChoice.MIT, "MIT"),
    (LicenseChoice.APACHE, "Apache 2.0"),
    (LicenseChoice.GPL, "GNU GPLv3"),
    (LicenseChoice.NONE, "None"),
)

DEFAULT_LICENSE = LicenseChoice.MIT

LICENSE_TEMPLATES: Mapping[LicenseChoice, str] = {
    LicenseChoice.MIT: """MIT License

Copyright (c) {{ year }} {{ holder|strip }}

Permission is hereby granted, free of charge, to any person obtaining a copy...
[Full MIT License Text]
""",
    LicenseChoice.APACHE: """Apache License 2.0

Copyright (c) {{ year }} {{ holder|strip }}

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
...
[Full Apache 2.0 License Text]
""",
    LicenseChoice.GPL: """GNU GENERAL PUBLIC LICENSE
Version 3, 29 June 2007

Copyright (C) {{ year }} {{ holder|strip }}

...
[Full GPLv3 License Text]
""",
}


def select_license(prompter: Prompter) -> LicenseChoice:
    """Show the license menu and return the chosen license.

    Anything other than a listed number is reported and treated as the first
    option; the user is not asked again.
    """

    choices = {}
    prompter.echo("Select a license:")
    for number, (choice, label) in enumerate(LICENSE_MENU, start=1):
        choices[str(number)] = choice
        prompter.echo(f"{number}) {label}")
    answer = prompter.ask(f"Enter choice [1-{len(LICENSE_MENU)}]:").strip()

    if answer in choices:
        return choices[answer]

    LOGGER.error("Invalid choice. Defaulting to %s.", DEFAULT_LICENSE.value)
    return DEFAULT_LICENSE


def render_license(
    choice: LicenseChoice,
    context: Mapping[str, object],
    renderer: TemplateRenderer | None = None,
) -> Optional[str]:
    """Return the ``LICENSE`` text for ``choice``, or ``None`` for no license."""

    template = LICENSE_TEMPLATES.get(choice)
    if template is None:
        return None
    renderer = renderer or TemplateRenderer()
    return renderer.render_string(template, context)
