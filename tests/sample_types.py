"""Classes with constant groups shared by the test modules."""

from constlabel import ConstantLabels, LabelSettings, OverrideMode


class Simple(ConstantLabels):
    GROUP_TEST_ONEWORD = 1
    GROUP_TEST_TWO_WORDS = 2
    GROUP_TEST_COM_plex_LAbeL = 3

    STATUS_DELETED = 0
    STATUS_ACTIVE = 100

    NOT_A_GROUP = "x"

    def helper(self):
        return "not a constant"


class Plain:
    """No mixin: resolved through constlabel.resolve directly."""
    GROUP_TEST_ONEWORD = 10
    GROUP_TEST_OTHER = 20
    STATUS_ACTIVE = "active"


class StaticOverrides(ConstantLabels):
    GROUP_TEST_ONEWORD = 1
    GROUP_TEST_TWO_WORDS = 2
    GROUP_TEST_COM_plex_LAbeL = 3

    constMagicLabels = {"GroupTest": {3: "COMP-lex-LaBEL", 0: "Extra label"}}


class ProviderOverrides(ConstantLabels):
    GROUP_TEST_ONEWORD = 1
    GROUP_TEST_TWO_WORDS = 2
    GROUP_TEST_COM_plex_LAbeL = 3

    const_label_settings = LabelSettings(override_mode=OverrideMode.PROVIDER)

    @staticmethod
    def constMagicLabels():
        return {"GroupTest": {3: "COMP-lex-LaBEL", 0: "Extra label"}}


class Child(Simple):
    STATUS_ARCHIVED = 50
    STATUS_ACTIVE = 101


class GetterPrefix(ConstantLabels):
    const_label_settings = LabelSettings(getter_prefix="get")

    LEVEL_LOW = 1
    LEVEL_HIGH = 2


class WithMethods:
    def instance_one(self):
        pass

    @classmethod
    def class_one(cls):
        pass

    @staticmethod
    def static_one():
        pass

    @property
    def prop(self):
        return 1

    CONSTANT = 1
