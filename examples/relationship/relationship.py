from erdlib import Parser

inputs = [
    "relationShip1(Entity1 [0,*], A[1,3], normalattr, _pkattr_)",
    "EntityType1(_a_, b, c)",
]


def main(debug=False):
    parser = Parser(debug=debug, debug_colors=debug)

    for input_str in inputs:
        result = parser.parse(input_str)

        kind = "relationship" if result.is_relationship() else "entity type"
        print(f"Parsed {kind}: {result.name}")
        for member in result.members:
            if member.is_entity_ref():
                print(f"--> {member.name} is entity -> "
                      f"min: {member.cardinality.min}, "
                      f"max: {member.cardinality.max}")
            else:
                print(f"--> {member.name} is attr. "
                      f"PK: {member.is_primary_key()}")


if __name__ == "__main__":
    main(debug=True)
