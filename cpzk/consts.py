from cpzk.group import GroupParams

# Subgroup of order 11 in Z_23^*. Only good for examples and tests.
TOY_GROUP = GroupParams(p=23, q=11, g=4, h=9)
