from . import terms
from . import polynomials

# re-export the most important functions and types
Term             = terms.Term
create_term      = terms.create_term
Polynomial       = polynomials.Polynomial
EMPTY            = polynomials.EMPTY
add              = polynomials.add
subtract         = polynomials.subtract
evaluate         = polynomials.evaluate
equal            = polynomials.equal
to_string        = polynomials.to_string
print_polynomial = polynomials.print_polynomial
for_each         = polynomials.for_each
destroy          = polynomials.destroy
normalize        = polynomials.normalize
is_well_formed   = polynomials.is_well_formed
