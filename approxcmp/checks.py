from beartype import BeartypeConf, beartype

# Accepts int wherever float is hinted (PEP 484 implicit numeric tower)
numeric_beartype = beartype(conf=BeartypeConf(is_pep484_tower=True))
