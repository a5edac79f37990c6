def load_tests(loader, tests, ignore):
    import doctest

    import grammodel.ast
    import grammodel.dependencies
    import grammodel.expr
    import grammodel.grammar
    import grammodel.production
    import grammodel.render
    import grammodel.root
    import grammodel.vocabulary

    tests.addTests(doctest.DocTestSuite(grammodel.ast))
    tests.addTests(doctest.DocTestSuite(grammodel.dependencies))
    tests.addTests(doctest.DocTestSuite(grammodel.expr))
    tests.addTests(doctest.DocTestSuite(grammodel.grammar))
    tests.addTests(doctest.DocTestSuite(grammodel.production))
    tests.addTests(doctest.DocTestSuite(grammodel.render))
    tests.addTests(doctest.DocTestSuite(grammodel.root))
    tests.addTests(doctest.DocTestSuite(grammodel.vocabulary))

    from . import test_root, test_grammar, test_render
    tests.addTests(loader.loadTestsFromModule(test_root))
    tests.addTests(loader.loadTestsFromModule(test_grammar))
    tests.addTests(loader.loadTestsFromModule(test_render))

    return tests

if __name__ == '__main__':
    import unittest
    unittest.main()
