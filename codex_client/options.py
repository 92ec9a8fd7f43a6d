"""Invoke option factories and the validating builder.

Each ``with_*`` factory returns a callable that sets one field on an
:class:`InvokeOptions`. Enum-valued options are checked when applied, so an
invalid value surfaces from :func:`build_invoke_options` (and therefore from
``CodexClient.invoke``) before any process is started.
"""

from __future__ import annotations

from os import PathLike
from typing import Callable, Iterable, Mapping, Union

from .errors import InvalidOptionError
from .protocol import ApprovalPolicy, ConfigValue, InvokeOptions, SandboxMode

InvokeOption = Callable[[InvokeOptions], None]


def with_approval_policy(approval_policy: Union[str, ApprovalPolicy]) -> InvokeOption:
    def apply(options: InvokeOptions) -> None:
        try:
            policy = ApprovalPolicy(approval_policy)
        except ValueError:
            raise InvalidOptionError("approval-policy", approval_policy) from None
        options.approval_policy = policy

    return apply


def with_base_instructions(base_instructions: str) -> InvokeOption:
    def apply(options: InvokeOptions) -> None:
        options.base_instructions = base_instructions

    return apply


def with_config(config: Mapping[str, ConfigValue]) -> InvokeOption:
    def apply(options: InvokeOptions) -> None:
        options.config = dict(config)

    return apply


def with_cwd(cwd: Union[str, PathLike]) -> InvokeOption:
    def apply(options: InvokeOptions) -> None:
        options.cwd = cwd

    return apply


def with_include_plan_tool(include_plan_tool: bool) -> InvokeOption:
    def apply(options: InvokeOptions) -> None:
        options.include_plan_tool = include_plan_tool

    return apply


def with_model(model: str) -> InvokeOption:
    def apply(options: InvokeOptions) -> None:
        options.model = model

    return apply


def with_profile(profile: str) -> InvokeOption:
    def apply(options: InvokeOptions) -> None:
        options.profile = profile

    return apply


def with_sandbox(sandbox: Union[str, SandboxMode]) -> InvokeOption:
    def apply(options: InvokeOptions) -> None:
        try:
            mode = SandboxMode(sandbox)
        except ValueError:
            raise InvalidOptionError("sandbox", sandbox) from None
        options.sandbox = mode

    return apply


def build_invoke_options(options: Iterable[InvokeOption]) -> InvokeOptions:
    """Apply ``options`` in order to a fresh InvokeOptions.

    The first failing option aborts the build; its error propagates and the
    half-built object is dropped.
    """
    built = InvokeOptions()
    for option in options:
        option(built)
    return built
