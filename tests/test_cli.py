import json
import tempfile
import unittest
from pathlib import Path

from typer.testing import CliRunner

from chembalancer.cli import app


class TestCLI(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_balance(self):
        result = self.runner.invoke(app, ["balance", "H2 + O2 -> H2O"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("2H2 + O2 → 2H2O", result.output)
        self.assertIn("Reaction type: Synthesis", result.output)
        self.assertIn("Verify balance", result.output)

    def test_balance_pretty(self):
        result = self.runner.invoke(app, ["balance", "--pretty", "H2 + O2 -> H2O"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("2H₂ + O₂ → 2H₂O", result.output)

    def test_pretty_output_reads_back(self):
        result = self.runner.invoke(app, ["balance", "2H₂ + O₂ → 2H₂O"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("2H2 + O2 → 2H2O", result.output)

    def test_balance_rejects_other_digit_characters(self):
        result = self.runner.invoke(app, ["balance", "H² + O2 -> H2O"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("MALFORMED_FORMULA", result.output)

    def test_balance_json(self):
        result = self.runner.invoke(app, ["balance", "--json", "CH4 + O2 = CO2 + H2O"])
        self.assertEqual(result.exit_code, 0)
        payload = json.loads(result.output)
        self.assertEqual(payload["balanced"], "CH4 + 2O2 → CO2 + 2H2O")
        self.assertEqual(payload["metadata"]["reactionType"], "combustion")

    def test_balance_with_config_and_output(self):
        with tempfile.TemporaryDirectory() as tmp:
            config = Path(tmp) / "solver.json"
            config.write_text(json.dumps({"method": "svd"}))
            output = Path(tmp) / "result.json"
            result = self.runner.invoke(
                app,
                ["balance", "Fe + O2 -> Fe2O3", "--config", str(config), "--output", str(output)],
            )
            self.assertEqual(result.exit_code, 0)
            saved = json.loads(output.read_text(encoding="utf-8"))
            self.assertEqual(saved["coefficients"], [4, 3, 2])

    def test_balance_rejects_bad_config(self):
        with tempfile.TemporaryDirectory() as tmp:
            config = Path(tmp) / "solver.json"
            config.write_text(json.dumps({"precision": 3}))
            result = self.runner.invoke(app, ["balance", "H2 + O2 -> H2O", "--config", str(config)])
            self.assertEqual(result.exit_code, 2)

    def test_balance_error(self):
        result = self.runner.invoke(app, ["balance", "Xx + O2 -> XxO2"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("UNKNOWN_ELEMENT", result.output)
        self.assertIn("Suggestion:", result.output)

    def test_weigh(self):
        result = self.runner.invoke(app, ["weigh", "Ca(OH)2"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("74.092 g/mol", result.output)
        self.assertIn("Ca x1", result.output)

    def test_weigh_json(self):
        result = self.runner.invoke(app, ["weigh", "--json", "H2O"])
        self.assertEqual(result.exit_code, 0)
        payload = json.loads(result.output)
        self.assertAlmostEqual(payload["weight"], 18.015, places=3)
        self.assertIn("H", payload["percent_composition"])

    def test_validate_warning(self):
        result = self.runner.invoke(app, ["validate", "H2  O2 -> H2O"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("[warning] MISSING_REACTANT_SEPARATOR", result.output)

    def test_validate_error(self):
        result = self.runner.invoke(app, ["validate", "H2 + O2"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("[error] MISSING_ARROW", result.output)

    def test_validate_clean(self):
        result = self.runner.invoke(app, ["validate", "H2 + O2 -> H2O"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("No issues found.", result.output)

    def test_classify(self):
        result = self.runner.invoke(app, ["classify", "AgNO3 + NaCl -> AgCl + NaNO3"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Double Replacement", result.output)

    def test_element(self):
        result = self.runner.invoke(app, ["element", "Fe"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(json.loads(result.output)["name"], "Iron")

    def test_unknown_element(self):
        result = self.runner.invoke(app, ["element", "FE"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Did you mean Fe", result.output)


if __name__ == "__main__":
    unittest.main()
