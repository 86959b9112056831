# Integer relation detection. Given real values x[0] < x[1] < ... < x[n-1]
# find integers c, not all zero, with sum(c[i]*x[i]) zero to working precision,
# or certify that no such relation has norm below a requested bound.
# This is PSLQ: Partial Sums of squares, Lower trapezoidal decomposition, LQ.
# See D. H. Bailey, "The PSLQ Integer Relation Algorithm", and the cpslq paper, section 3.
# The H matrix is n rows of n-1 reals, lower trapezoidal. The A and B matrices are
# n x n integers, both starting as identity. A collects the row operations done
# on H and B collects the matching (inverse) column operations, so that at
# solution time a column of B is the relation.
# The values may be float, or mpmath mpf for any higher precision, the
# precision then being that of mpmath.mp when the search runs.

# CALL DEPENDENCY
# ----------------------------------------------------------------------
# run()           --> validate(), setup(), invariants(), reduce(), step(),
#                     solution(), extract(), norm_bound()
# validate()      --> reject()
# setup()         --> reject()
# invariants()    --> reject()
# reduce()        --> row_sub_place()
# step()          --> pivot(), swap(), givens(), digest()
# digest()        --> row_sub_place()
# extract()       --> NONE
# ----------------------------------------------------------------------
# find_relation()      --> pslq.run()
# find_relation_dict() --> find_relation(), format_relation()
# identify()           --> constants.standard_dictionary(), find_relation_dict()
import enum
import logging
import math
from num_funs import real_type, epsilon, sqrt, exp, log, nint, ulp_distance, dot
import constants

logger = logging.getLogger(__name__)

DEFAULT_GAMMA = 2/math.sqrt(3) + 0.01 # just above the smallest allowed gamma

class Status(enum.Enum):
  ''' outcome of a relation search, every path that returns no relation has its own '''
  OK = 0
  INVALID_INPUT = 1
  PARAMETER_OUT_OF_RANGE = 2
  PRECISION_INSUFFICIENT = 3
  INVARIANT_VIOLATION = 4
  NORM_BOUND_EXHAUSTED = 5
  RESIDUAL_TOO_LARGE = 6

class pslq(object):
  def __init__(self, x, max_norm_bound, gamma=None, disp=False, check=False):
    ''' lattice state for one search for an integer relation among the values x '''
    if gamma is None: gamma = DEFAULT_GAMMA
    self.x = list(x) # the caller's values, used for the returned relation
    self.n = len(self.x)
    self.real = real_type(self.x)
    self.xr = [self.real(t) for t in self.x] # working copy in a single real type
    self.gamma = self.real(gamma)
    self.max_norm_bound = self.real(max_norm_bound)
    self.eps = epsilon(self.real(1))
    self.disp = disp # print the progress while iterating
    self.check = check # verify y*H = 0 after each iteration
    self.status = None
    self.relation = []
    self.bounds = [] # the norm bound at each iteration
    self.anomalies = 0 # number of times the norm bound decreased
    self.iteration = 0
    self.expected = 0
    self.s_sq = []
    self.y = []
    self.H = []
    self.A = []
    self.B = []
  def reject(self, status, msg, *args):
    ''' record why no relation is returned '''
    self.status = status
    if status == Status.INVARIANT_VIOLATION: logger.error(msg, *args)
    else: logger.warning(msg, *args)
    return status
  def tau(self):
    return 1/sqrt(self.real(1)/4 + 1/(self.gamma*self.gamma))
  def validate(self):
    ''' check the input before any numeric work. Returns the failing Status or None '''
    x = self.xr
    for i in range(1, self.n):
      if x[i] < x[i-1]:
        return self.reject(Status.INVALID_INPUT, "Elements must be sorted in increasing order.")
    if not self.gamma > 2/sqrt(self.real(3)): # also rejects a nan
      return self.reject(Status.PARAMETER_OUT_OF_RANGE, "gamma > 2/sqrt(3) is required, got %s.", self.gamma)
    tau = self.tau()
    if not 1 < tau < 2:
      return self.reject(Status.PARAMETER_OUT_OF_RANGE, "tau in (1, 2) is required, got %s.", tau)
    if not self.max_norm_bound > 0:
      return self.reject(Status.PARAMETER_OUT_OF_RANGE, "The maximum norm bound must be positive, got %s.", self.max_norm_bound)
    if self.n < 2:
      return self.reject(Status.INVALID_INPUT, "At least two values are required to find an integer relation.")
    for t in x:
      if not t == t:
        return self.reject(Status.INVALID_INPUT, "A value is not a number.")
      if t == 0:
        return self.reject(Status.INVALID_INPUT, "Zero in the values gives trivial relations.")
      if t < 0:
        return self.reject(Status.INVALID_INPUT, "The algorithm is reflection invariant, so negative values should be removed.")
    s0 = sum(t*t for t in x)
    if self.max_norm_bound*self.max_norm_bound*s0 > 1/self.eps:
      return self.reject(Status.PRECISION_INSUFFICIENT,
        "The maximum norm bound %s is too large, spurious relations would be recovered. "
        "Either reduce the norm bound or increase the precision of the values. "
        "At this precision the norm bound cannot exceed %s.",
        self.max_norm_bound, 1/sqrt(s0*self.eps))
    return None
  def setup(self):
    ''' build s_sq, H, y and the identity A and B. Returns the failing Status or None '''
    x, n = self.xr, self.n
    s = [self.real(0) for i in range(n)]
    s[n-1] = x[n-1]*x[n-1]
    for i in range(n-2, -1, -1): s[i] = s[i+1] + x[i]*x[i] # partial sums from the right
    self.s_sq = s
    self.H = [[self.real(0) for j in range(n-1)] for i in range(n)]
    for i in range(n):
      for j in range(min(i+1, n-1)): # the last row has no diagonal entry
        if i == j: self.H[i][i] = sqrt(s[i+1]/s[i])
        else: self.H[i][j] = -x[i]*x[j]/sqrt(s[j]*s[j+1])
    self.y = [t/sqrt(s[0]) for t in x]
    self.A = [[int(i == j) for j in range(n)] for i in range(n)]
    self.B = [[int(i == j) for j in range(n)] for i in range(n)]
    for i in range(n):
      if abs(self.y[i]) < self.eps:
        return self.reject(Status.PRECISION_INSUFFICIENT,
          "Element y[%d] = %s is too small, more precision is required.", i, self.y[i])
    for i in range(1, n): # y is sorted since x is
      if ulp_distance(self.y[i], self.y[i-1]) <= 2:
        return self.reject(Status.PRECISION_INSUFFICIENT,
          "Elements y[%d] = %s and y[%d] = %s are too close together.", i-1, self.y[i-1], i, self.y[i])
    return None
  def invariants(self, full=True):
    ''' check |H|^2 = n - 1 (only if full, it holds for the initial H) and y*H = 0 '''
    n = self.n
    tol = sqrt(self.eps)
    if full:
      hnorm = sum(h*h for row in self.H for h in row)
      if abs(hnorm/(n-1) - 1) > tol:
        return self.reject(Status.INVARIANT_VIOLATION,
          "|H|^2 = %s differs from n - 1 = %d, the partial sums of squares are wrong; this is a bug.", hnorm, n-1)
    for j in range(n-1):
      v = sum(self.y[i]*self.H[i][j] for i in range(n))
      if abs(v)/(n-1) > tol:
        return self.reject(Status.INVARIANT_VIOLATION,
          "(y*H)[%d] = %s is not zero after %d iterations; this is a bug.", j, v, self.iteration)
    return None
  def expected_iterations(self):
    ''' the iteration count in which PSLQ reaches the maximum norm bound '''
    n = self.n
    t = math.comb(n, 2)*((n-1)*log(self.gamma) + log(self.max_norm_bound))/log(self.tau())
    return max(1, math.ceil(float(t)))
  def row_sub_place(self, r1, r2, k):
    ''' row r1 of H and A becomes r1 - k*r2, column r2 of B becomes r2 + k*r1,
        and y[r2] gets plus k*y[r1] so that y*H stays zero '''
    if k == 0: return
    self.y[r2] += k*self.y[r1]
    for g in range(r2+1): # H[r2] is zero beyond the diagonal
      self.H[r1][g] -= k*self.H[r2][g]
    for g in range(self.n):
      self.A[r1][g] -= k*self.A[r2][g]
      self.B[g][r2] += k*self.B[g][r1]
  def nearest(self, i, j):
    ''' the nearest integer of H[i][j]/H[j][j] '''
    if self.H[j][j] == 0: return 0
    return nint(self.H[i][j]/self.H[j][j])
  def reduce(self):
    ''' size reduce all of H before the iterations '''
    for i in range(1, self.n):
      for j in range(i-1, -1, -1):
        self.row_sub_place(i, j, self.nearest(i, j))
  def pivot(self):
    ''' the index m with gamma**(m+1)*|H[m][m]| largest, the first one on ties '''
    g = self.gamma
    mx, m = 0, -1
    for i in range(self.n-1):
      t = g*abs(self.H[i][i])
      if t > mx: mx, m = t, i
      g *= self.gamma
    return m
  def swap(self, m):
    ''' exchange entries m and m+1 of y, rows of A and H, columns of B '''
    self.y[m], self.y[m+1] = self.y[m+1], self.y[m]
    self.A[m], self.A[m+1] = self.A[m+1], self.A[m]
    self.H[m], self.H[m+1] = self.H[m+1], self.H[m]
    for row in self.B:
      row[m], row[m+1] = row[m+1], row[m]
  def givens(self, r, c0, c1):
    ''' do givens on the columns c0 and c1 of H so that the value in row r column c1 is zero '''
    c = self.H[r][c0]
    s = self.H[r][c1]
    dis = sqrt(c*c + s*s)
    if dis == 0: return
    c, s = c/dis, s/dis
    for g in range(r, self.n): # rows above r are zero in both columns
      i = c*self.H[g][c0] + s*self.H[g][c1]
      j = c*self.H[g][c1] - s*self.H[g][c0]
      self.H[g][c0] = i
      self.H[g][c1] = j
  def digest(self, m):
    ''' size reduce the rows changed by the exchange at m '''
    for i in range(m+1, self.n):
      for j in range(min(i-1, m+1), -1, -1):
        self.row_sub_place(i, j, self.nearest(i, j))
  def step(self):
    ''' one PSLQ iteration: pivot, exchange, corner removal, reduction.
        Returns the failing Status or None '''
    m = self.pivot()
    if m < 0 or m >= self.n - 1:
      return self.reject(Status.INVARIANT_VIOLATION, "Pivot m = %d is out of range, the exchange is undefined.", m)
    self.swap(m)
    if m < self.n - 2: self.givens(m, m, m+1)
    self.digest(m)
    if self.check: return self.invariants(full=False)
    return None
  def solution(self):
    ''' first index of y small enough to be a relation, or None '''
    thresh = self.eps**(self.real(15)/16) # stricter than eps to avoid marginal relations
    for i in range(self.n):
      if abs(self.y[i]) < thresh: return i
    return None
  def norm_bound(self):
    ''' 1/max|H[i][i]|, no relation of smaller norm exists. None if H has a zero diagonal '''
    mx = max(abs(self.H[i][i]) for i in range(self.n-1))
    if mx == 0:
      self.reject(Status.INVARIANT_VIOLATION, "The diagonal of H is zero; this is a bug.")
      return None
    return 1/mx
  def extract(self, i):
    ''' the relation from column i of B, with a check of its residual '''
    col = [self.B[j][i] for j in range(self.n)]
    residual = dot(col, self.xr)
    absum = sum(abs(col[j]*self.xr[j]) for j in range(self.n))
    tolerable = 16*self.eps*absum
    if abs(residual) > tolerable:
      self.status = Status.RESIDUAL_TOO_LARGE
      logger.warning("Found a relation with a large residual: %s is larger than the tolerable residual %s. "
        "The values may not be given to the full accuracy of %s.", abs(residual), tolerable, self.real.__name__)
    else:
      self.status = Status.OK
      logger.info("Found a relation after %d iterations.", self.iteration + 1)
    self.relation = [(col[j], self.x[j]) for j in range(self.n) if col[j] != 0]
    return self.relation
  def run(self):
    ''' search for the relation. Returns a list of (coefficient, value) or [] with self.status telling why '''
    self.relation = []
    self.bounds = []
    self.anomalies = 0
    self.iteration = 0
    if self.validate() or self.setup() or self.invariants(): return []
    self.reduce()
    bound = self.norm_bound()
    if bound is None: return []
    self.bounds.append(bound)
    self.expected = self.expected_iterations()
    logger.debug("Expected number of iterations = %d", self.expected)
    while bound < self.max_norm_bound:
      if self.iteration >= self.expected:
        logger.warning("No relation after the expected %d iterations, norm bound %s.", self.expected, bound)
        break
      if self.step(): return []
      i = self.solution()
      if i is not None:
        if self.disp: print()
        return self.extract(i)
      last = bound
      bound = self.norm_bound()
      if bound is None: return []
      self.bounds.append(bound)
      self.iteration += 1
      if self.disp: print("Norm bound = %s/%s, iteration %d/%d" % (bound, self.max_norm_bound, self.iteration, self.expected), end="\r")
      if bound < last:
        self.anomalies += 1
        logger.warning("Norm bound has decreased from %s to %s at iteration %d.", last, bound, self.iteration)
    if self.disp: print()
    self.status = Status.NORM_BOUND_EXHAUSTED
    logger.info("There is no integer relation with norm less than %s.", bound)
    return []

def find_relation(x, max_norm_bound, gamma=None, disp=False, check=False):
  ''' list of (coefficient, value) with sum(coefficient*value) = 0, or [] when there is none
      of norm below max_norm_bound. gamma defaults to DEFAULT_GAMMA '''
  return pslq(x, max_norm_bound, gamma, disp, check).run()

def format_relation(relation, dictionary):
  ''' the relation as an equation in the values and the same equation in their symbols '''
  if not relation: return ""
  c, v = relation[0]
  total = c*v
  num = "%d⋅%s" % (c, v)
  sym = "%d⋅%s" % (c, dictionary[v])
  for c, v in relation[1:]:
    if c < 0: op = " - "
    else: op = " + "
    num += op + "%d⋅%s" % (abs(c), v)
    sym += op + "%d⋅%s" % (abs(c), dictionary[v])
    total += c*v
  return "As\n\t" + num + " = " + str(total) + ",\nit is likely that\n\t" + sym + " = 0."

def find_relation_dict(dictionary, max_norm_bound, gamma=None):
  ''' find_relation() on the values of a {value: symbol} dictionary, rendered by format_relation() '''
  values = sorted(dictionary)
  return format_relation(find_relation(values, max_norm_bound, gamma), dictionary)

def identify(value, symbol, max_norm_bound, dictionary=None):
  ''' look for a relation of value (and its exp, reciprocal and square) with known constants,
      by default those of constants.standard_dictionary() '''
  if dictionary is None: dictionary = constants.standard_dictionary()
  d = dict(dictionary)
  d.setdefault(value, symbol) # a known constant keeps its own symbol
  d.setdefault(exp(value), "exp(" + symbol + ")")
  d.setdefault(1/value, "1/" + symbol)
  d.setdefault(value*value, symbol + "²")
  return find_relation_dict(d, max_norm_bound, DEFAULT_GAMMA)
