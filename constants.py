# Tables of named constants for identify(). Each is a {value: symbol} dictionary
# of mpmath reals evaluated at the current mpmath precision, so build them
# inside the precision (mp.dps or mp.workdps) that the search will use.
import mpmath

def small_dictionary():
  ''' pi, e, sqrt(2), ln(2). For quick searches and tests '''
  m = {}
  m[+mpmath.pi] = "π"
  m[+mpmath.e] = "e"
  m[mpmath.sqrt(2)] = "√2"
  m[+mpmath.ln2] = "ln(2)"
  return m

def standard_dictionary():
  ''' the constants identify() searches against by default '''
  m = {}
  g = +mpmath.euler
  m[g] = "γ"
  m[g**2] = "γ²"
  m[g**3] = "γ³"
  m[1/g] = "1/γ"
  m[1/g**2] = "1/γ²"
  m[1/g**3] = "1/γ³"
  m[-mpmath.log(g)] = "-ln(γ)"
  m[mpmath.exp(g)] = "exp(γ)"

  z = mpmath.zeta(3)
  m[mpmath.sqrt(z)] = "√ζ(3)"
  m[z] = "ζ(3)"
  m[1/z] = "1/ζ(3)"
  m[1/z**2] = "1/ζ(3)²"
  m[1/z**3] = "1/ζ(3)³"
  m[mpmath.log(z)] = "ln(ζ(3))"
  m[mpmath.exp(z)] = "exp(ζ(3))"
  m[z**2] = "ζ(3)²"
  m[z**3] = "ζ(3)³"
  m[z**4] = "ζ(3)⁴"

  p = +mpmath.pi
  m[p] = "π"
  m[1/p] = "1/π"
  m[1/p**2] = "1/π²"
  m[mpmath.sqrt(p)] = "√π"
  m[mpmath.cbrt(p)] = "∛π"
  m[mpmath.log(p)] = "ln(π)"
  m[p**2] = "π²"
  m[p**3] = "π³"

  e = +mpmath.e
  m[e] = "e"
  m[mpmath.sqrt(e)] = "√e"
  for k in (2, 3, 5, 7, 11):
    m[mpmath.sqrt(k)] = "√%d" % k

  # phi itself is linearly dependent on sqrt(5), its logarithm is not
  m[mpmath.log(mpmath.phi)] = "ln(φ)"
  m[mpmath.exp(mpmath.phi)] = "exp(φ)"

  G = +mpmath.catalan
  m[G] = "G"
  m[G**2] = "G²"
  m[1/G] = "1/G"
  m[-mpmath.log(G)] = "-ln(G)"
  m[mpmath.exp(G)] = "exp(G)"
  m[mpmath.sqrt(G)] = "√G"

  A = +mpmath.glaisher
  m[A] = "A"
  m[A**2] = "A²"
  m[1/A] = "1/A"
  m[mpmath.log(A)] = "ln(A)"
  m[mpmath.exp(A)] = "exp(A)"

  K = +mpmath.khinchin
  m[K] = "K₀"
  m[mpmath.log(K)] = "ln(K₀)"
  m[mpmath.exp(K)] = "exp(K₀)"
  m[1/K] = "1/K₀"
  m[K**2] = "K₀²"

  # logarithms of small primes, to recover multiplicative relations
  m[mpmath.log(2)] = "ln(2)"
  m[-mpmath.log(mpmath.log(2))] = "-ln(ln(2))"
  for q in (3, 5, 7, 11, 13, 17, 19):
    m[mpmath.log(q)] = "ln(%d)" % q

  W = mpmath.lambertw(1).real # the omega constant, W0(1)
  m[W] = "Ω"
  m[W**2] = "Ω²"
  m[1/W] = "1/Ω"
  return m
