"""CLI Commands"""

import os

from aicommit.config import Config, ConfigManager, get_config_path, ENV_COMMAND, ENV_TIMEOUT
from aicommit.output import bold, dim, info


def display_config(config: Config) -> int:
    """Display the effective configuration and where it came from."""
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no {ConfigManager.CONFIG_FILENAME} found)")

    overrides = [(name, os.environ.get(name)) for name in (ENV_COMMAND, ENV_TIMEOUT)]
    overrides = [(name, value) for name, value in overrides if value]
    if overrides:
        print(f"  {dim('Environment overrides:')}")
        for name, value in overrides:
            print(f"    {name}={value}")

    timeout = f"{config.timeout:g}s" if config.timeout else "none"
    prompt_flag = config.prompt_flag or "(positional)"

    print()
    print(f"  {bold('Settings:')}")
    print(f"    command:          {info(config.command)}")
    print(f"    prompt_flag:      {info(prompt_flag)}")
    print(f"    extra_args:       {info(' '.join(config.extra_args) or 'none')}")
    print(f"    timeout:          {info(timeout)}")
    print(f"    auto_add:         {info(str(config.auto_add).lower())}")
    print(f"    show_status:      {info(str(config.show_status).lower())}")
    print(f"    max_file_display: {info(str(config.max_file_display))}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  {ConfigManager.CONFIG_FILENAME} (in current directory)")
    print(f"    Global: ~/{ConfigManager.CONFIG_FILENAME}\n")

    return 0
