import unittest

from adjust.command import buildCommand, formatEcho, formatValue, runShell


class TestFormatValue(unittest.TestCase):
    def testTrimsTrailingZeros(self) -> None:
        self.assertEqual(formatValue(0.4), "0.4")
        self.assertEqual(formatValue(20.0), "20")

    def testSixSignificantDigits(self) -> None:
        self.assertEqual(formatValue(0.1 + 0.2), "0.3")  # 0.30000000000000004
        self.assertEqual(formatValue(1234567.0), "1.23457e+06")

    def testNegative(self) -> None:
        self.assertEqual(formatValue(-2.5), "-2.5")


class TestBuildCommand(unittest.TestCase):
    def testSubstitutesValue(self) -> None:
        self.assertEqual(buildCommand("xgamma -gamma %", 0.4), "xgamma -gamma 0.4 2>/dev/null")

    def testMarkerInMiddle(self) -> None:
        cmd = buildCommand("echo % > /sys/class/backlight/nvidia_0/brightness", 20.0)
        self.assertEqual(cmd, "echo 20 > /sys/class/backlight/nvidia_0/brightness 2>/dev/null")

    def testNoMarkerIgnoresValue(self) -> None:
        for value in (0.0, 1.5, 99.0):
            self.assertEqual(buildCommand("xrefresh", value), "xrefresh 2>/dev/null")

    def testOnlyFirstMarkerReplaced(self) -> None:
        self.assertEqual(buildCommand("echo % %", 3.0), "echo 3 % 2>/dev/null")

    def testCustomSuffix(self) -> None:
        self.assertEqual(buildCommand("set %", 1.0, suffix=""), "set 1")


class TestEcho(unittest.TestCase):
    # status line uses fixed notation, unlike the command
    def testFixedNotation(self) -> None:
        self.assertEqual(formatEcho("gamma", 0.4), "gamma : 0.400000\r")
        self.assertEqual(formatEcho("brightness", 20.0), "brightness : 20.000000\r")

    def testNoNewline(self) -> None:
        self.assertNotIn("\n", formatEcho("gamma", 0.5))


class TestRunShell(unittest.TestCase):
    def testFailureNotReported(self) -> None:
        self.assertIsNone(runShell("exit 3"))


if __name__ == "__main__":
    unittest.main(verbosity=2)
