"""CLI Commands"""

import os
import shutil
import sys

from aicommit.config import Config, get_config_path
from aicommit.i18n import resolve_language
from aicommit.output import bold, dim, info, success, error


def display_config(config: Config) -> int:
    """Display the effective configuration and where it came from."""
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .aicommitrc found)")

    overrides = {name: os.environ.get(name) for name in ('COMMIT_LANG', 'COMMIT_MODEL', 'COMMIT_AGENT')}
    overrides = {k: v for k, v in overrides.items() if v}
    if overrides:
        print(f"  {dim('Environment overrides:')}")
        for name, value in overrides.items():
            print(f"    {name}={value}")

    language = resolve_language(os.environ.get('COMMIT_LANG'), None, config.language)
    api_key = success('set') if os.environ.get('ANTHROPIC_API_KEY') else error('not set')
    agent = config.agent_command
    agent_found = success('found') if shutil.which(agent) else error('not found')

    print()
    print(f"  {bold('Settings:')}")
    print(f"    language:        {info(language)}")
    print(f"    model:           {info(config.model or 'default')}")
    print(f"    agent_command:   {info(agent)} ({agent_found})")
    print(f"    max_diff_chars:  {info(str(config.max_diff_chars))}")
    print(f"    agent_timeout:   {info(str(config.agent_timeout))}s")
    print(f"    ANTHROPIC_API_KEY: {api_key}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .aicommitrc (in current directory)")
    print(f"    Global: ~/.aicommitrc\n")

    return 0


def run_install_completion() -> int:
    """Print shell tab completion setup instructions."""
    shell = os.environ.get('SHELL', '')
    line = 'eval "$(register-python-argcomplete aicommit)"'

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell aicommit | Out-String | Invoke-Expression")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish aicommit | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
