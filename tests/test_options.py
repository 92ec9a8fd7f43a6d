import unittest

from codex_client.errors import InvalidOptionError
from codex_client.options import (
    build_invoke_options,
    with_approval_policy,
    with_base_instructions,
    with_config,
    with_cwd,
    with_include_plan_tool,
    with_model,
    with_profile,
    with_sandbox,
)
from codex_client.protocol import ApprovalPolicy, InvokeOptions, SandboxMode


class ApprovalPolicyOptionTests(unittest.TestCase):
    def test_valid_values(self):
        for value in ("untrusted", "on-failure", "never"):
            opts = build_invoke_options([with_approval_policy(value)])
            self.assertEqual(opts.to_arguments("p")["approval-policy"], value)

    def test_accepts_enum_member(self):
        opts = build_invoke_options([with_approval_policy(ApprovalPolicy.NEVER)])
        self.assertIs(opts.approval_policy, ApprovalPolicy.NEVER)

    def test_invalid_values(self):
        for value in ("", "always", "Never", "on_failure", " never"):
            with self.assertRaises(InvalidOptionError) as ctx:
                build_invoke_options([with_approval_policy(value)])
            self.assertEqual(str(ctx.exception), f"invalid approval-policy: {value}")
            self.assertEqual(ctx.exception.field, "approval-policy")
            self.assertIsInstance(ctx.exception, ValueError)

    def test_creating_invalid_option_does_not_raise(self):
        option = with_approval_policy("sometimes")
        target = InvokeOptions()
        with self.assertRaises(InvalidOptionError):
            option(target)
        self.assertIsNone(target.approval_policy)


class SandboxOptionTests(unittest.TestCase):
    def test_valid_values(self):
        for value in ("read-only", "workspace-write", "danger-full-access"):
            opts = build_invoke_options([with_sandbox(value)])
            self.assertEqual(opts.to_arguments("p")["sandbox"], value)
            self.assertIsInstance(opts.sandbox, SandboxMode)

    def test_invalid_values(self):
        for value in ("", "full", "READ-ONLY", "read_only"):
            with self.assertRaises(InvalidOptionError) as ctx:
                build_invoke_options([with_sandbox(value)])
            self.assertEqual(str(ctx.exception), f"invalid sandbox: {value}")


class BuildInvokeOptionsTests(unittest.TestCase):
    def test_no_options(self):
        self.assertEqual(build_invoke_options([]), InvokeOptions())

    def test_free_form_options(self):
        opts = build_invoke_options(
            [
                with_base_instructions("only answer in haiku"),
                with_config({"a": 1, "b": {"c": True}}),
                with_cwd("/work"),
                with_include_plan_tool(True),
                with_model("gpt-5"),
                with_profile("ci"),
            ]
        )
        self.assertEqual(opts.base_instructions, "only answer in haiku")
        self.assertEqual(opts.config, {"a": 1, "b": {"c": True}})
        self.assertEqual(opts.cwd, "/work")
        self.assertTrue(opts.include_plan_tool)
        self.assertEqual(opts.model, "gpt-5")
        self.assertEqual(opts.profile, "ci")

    def test_later_option_overrides_earlier(self):
        opts = build_invoke_options([with_model("a"), with_model("b")])
        self.assertEqual(opts.model, "b")

    def test_first_failure_stops_the_build(self):
        applied = []

        def spy(options):
            applied.append(True)

        with self.assertRaises(InvalidOptionError) as ctx:
            build_invoke_options([with_model("m"), with_sandbox("nope"), spy, with_approval_policy("bad")])
        self.assertEqual(str(ctx.exception), "invalid sandbox: nope")
        self.assertEqual(applied, [])

    def test_config_is_copied(self):
        config = {"k": "v"}
        opts = build_invoke_options([with_config(config)])
        config["k"] = "changed"
        self.assertEqual(opts.config, {"k": "v"})


if __name__ == "__main__":
    unittest.main()
